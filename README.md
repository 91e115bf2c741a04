# suffixtable

Find the public suffix (eTLD) of a domain name and its registrable domain
(eTLD+1) by walking a compact, bit-packed suffix table.

A public suffix is a name under which anyone can register a domain:
`com`, `co.uk`, `com.au`. The eTLD+1 is the public suffix plus one more
label, which is what browsers use to decide which sites may share cookies.
`www.books.amazon.co.uk`, `books.amazon.co.uk` and `amazon.co.uk` all have
the same eTLD+1, `amazon.co.uk`.

## Installation

```
pip install suffixtable
```

The package has no runtime dependencies.

## What the package does not include

The package contains the lookup code only. It does not ship a table built
from the public suffix list, and it has no tool for building one: you bring
your own `Table`, generated elsewhere from a list in the public suffix list
format (one rule per line, `//` comments, blank lines; wildcard rules such
as `*.kobe.jp` and exception rules such as `!city.kobe.jp`).

## The table

Everything lives in `suffixtable.lookup`. A `Table` is a frozen dataclass
whose fields are all keyword-only:

| Field                       | Meaning                                                        |
|-----------------------------|----------------------------------------------------------------|
| `text`                      | all node labels concatenated                                   |
| `nodes`                     | one packed integer per node                                    |
| `children`                  | one packed integer per children entry                          |
| `num_tld`                   | number of top level domains; they are nodes `0 .. num_tld-1`   |
| `nodes_bits_text_length`    | width of the label length, in the lowest bits of a node        |
| `nodes_bits_text_offset`    | width of the label offset into `text`, next above              |
| `nodes_bits_icann`          | width of the ICANN flag, next above                            |
| `nodes_bits_children`       | width of the index into `children`, next above                 |
| `children_bits_lo`          | width of the first child node index, lowest bits of an entry   |
| `children_bits_hi`          | width of the end (exclusive) of the child node range           |
| `children_bits_node_type`   | width of the node type                                         |
| `children_bits_wildcard`    | width of the wildcard flag, highest                            |
| `node_type_normal`          | node type value of an ordinary rule                            |
| `node_type_exception`       | node type value of an exception rule                           |

Each run of sibling nodes must be sorted by label, since lookups use a
binary search over it.

## Usage

Wrap a table in a `ListProvider`:

```python
from suffixtable.lookup import ListProvider

provider = ListProvider(table)

provider.public_suffix("www.books.amazon.co.uk")   # "co.uk"
provider.public_suffix("foo.nosuchtld")            # "nosuchtld"

provider.effective_tld_plus_one("www.books.amazon.co.uk")  # "amazon.co.uk"
provider.is_effective_tld("co.uk")                          # True
```

The results shown assume a table generated from the public suffix list.
When no rule matches, the prevailing rule is `*`, so the last label is the
public suffix. An empty string has the empty public suffix.

Inputs must be ASCII; convert internationalised names to punycode first,
for example with `"bücher.de".encode("idna").decode("ascii")`. Results are
slices of the input.

Two lower-level helpers are public as well:

- `provider.node_label(index)` returns the label of a node.
- `provider.find(label, lo, hi)` returns the index of the node in
  `[lo, hi)` whose label equals `label`, or `None`.

## Errors

`effective_tld_plus_one` raises a subclass of `SuffixError` (itself a
`ValueError`):

| Exception                    | When                                                        |
|------------------------------|-------------------------------------------------------------|
| `EmptyLabelError`            | the name starts or ends with a dot, or contains `..`        |
| `CannotDeriveETldPlus1Error` | the name is itself a public suffix, so there is no eTLD+1   |
| `InvalidPublicSuffixError`   | the suffix found does not sit on a label boundary           |

```python
from suffixtable.lookup import SuffixError

try:
    provider.effective_tld_plus_one("com.au")
except SuffixError as exc:
    print(type(exc).__name__)  # CannotDeriveETldPlus1Error
```

`is_effective_tld` returns `False` for names with empty labels rather than
raising.

## Custom providers

`EffectiveTLDProvider` is an abstract base class with a single abstract
method, `effective_tld_plus_one(domain)`. Code that only needs eTLD+1
answers can depend on it; `ListProvider` is the table-backed
implementation.

## Development

```
pip install -e ".[test]"
pytest
```