"""Public suffix and eTLD+1 lookup over a compact, bit-packed suffix table."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

__all__ = [
    "Table",
    "SuffixError",
    "CannotDeriveETldPlus1Error",
    "EmptyLabelError",
    "InvalidPublicSuffixError",
    "EffectiveTLDProvider",
    "ListProvider",
]


def _mask(bits: int) -> int:
    return (1 << bits) - 1


@dataclass(frozen=True, kw_only=True)
class Table:
    """A generated public suffix table.

    ``nodes`` holds one packed integer per node: the index into ``children``,
    the ICANN bit, and the offset and length of the node's label in ``text``.
    ``children`` holds, per entry, the wildcard bit, the node type and the
    ``[lo, hi)`` range of child node indexes. The first ``num_tld`` nodes are
    the top level domains, sorted by label.
    """

    nodes_bits_children: int
    nodes_bits_icann: int
    nodes_bits_text_offset: int
    nodes_bits_text_length: int

    children_bits_wildcard: int
    children_bits_node_type: int
    children_bits_hi: int
    children_bits_lo: int

    node_type_normal: int
    node_type_exception: int

    num_tld: int
    text: str
    nodes: Sequence[int]
    children: Sequence[int]


class SuffixError(ValueError):
    """Base class for errors raised while deriving an eTLD+1."""


class CannotDeriveETldPlus1Error(SuffixError):
    """The domain has no label beyond its public suffix."""


class EmptyLabelError(SuffixError):
    """The domain has an empty label."""


class InvalidPublicSuffixError(SuffixError):
    """The public suffix found does not line up with the domain's labels."""


def _has_empty_label(domain: str) -> bool:
    return domain.startswith(".") or domain.endswith(".") or ".." in domain


class EffectiveTLDProvider(ABC):
    """Anything that can compute the effective TLD plus one label."""

    @abstractmethod
    def effective_tld_plus_one(self, domain: str) -> str:
        """Return the eTLD+1 of an ASCII (punycode) domain, e.g.
        "example.com" for "www.shop.example.com"."""


class ListProvider(EffectiveTLDProvider):
    """Answers public suffix questions from a generated :class:`Table`."""

    def __init__(self, table: Table) -> None:
        self.table = table

    def effective_tld_plus_one(self, domain: str) -> str:
        if _has_empty_label(domain):
            raise EmptyLabelError(f"empty label in domain {domain!r}")

        suffix = self.public_suffix(domain)
        if len(domain) <= len(suffix):
            raise CannotDeriveETldPlus1Error(
                f"cannot derive eTLD+1 for domain {domain!r}"
            )
        i = len(domain) - len(suffix) - 1
        if domain[i] != ".":
            raise InvalidPublicSuffixError(
                f"invalid public suffix {suffix!r} for domain {domain!r}"
            )
        return domain[domain.rfind(".", 0, i) + 1 :]

    def public_suffix(self, domain: str) -> str:
        """Return the public suffix of an ASCII (punycode) domain."""
        t = self.table
        lo, hi = 0, t.num_tld
        s = domain
        suffix_start = len(domain)
        wildcard = False

        while True:
            dot = s.rfind(".")
            if wildcard:
                suffix_start = dot + 1
            if lo == hi:
                break
            found = self.find(s[dot + 1 :], lo, hi)
            if found is None:
                break

            u = t.nodes[found] >> (t.nodes_bits_text_offset + t.nodes_bits_text_length)
            u >>= t.nodes_bits_icann
            u = t.children[u & _mask(t.nodes_bits_children)]
            lo = u & _mask(t.children_bits_lo)
            u >>= t.children_bits_lo
            hi = u & _mask(t.children_bits_hi)
            u >>= t.children_bits_hi
            node_type = u & _mask(t.children_bits_node_type)
            if node_type == t.node_type_normal:
                suffix_start = dot + 1
            elif node_type == t.node_type_exception:
                suffix_start = len(s) + 1
                break
            u >>= t.children_bits_node_type
            wildcard = (u & _mask(t.children_bits_wildcard)) != 0
            if dot < 0:
                break
            s = s[:dot]

        if suffix_start == len(domain):
            # No rule matched: the prevailing rule is "*".
            suffix_start = domain.rfind(".") + 1
        return domain[suffix_start:]

    def is_effective_tld(self, domain: str) -> bool:
        """Return True if ``domain`` is itself a public suffix."""
        if _has_empty_label(domain):
            return False
        return self.public_suffix(domain) == domain

    def find(self, label: str, lo: int, hi: int) -> Optional[int]:
        """Return the index in ``[lo, hi)`` of the node labelled ``label``.

        The range must be sorted by label; returns None if absent.
        """
        while lo < hi:
            mid = lo + (hi - lo) // 2
            current = self.node_label(mid)
            if current < label:
                lo = mid + 1
            elif current == label:
                return mid
            else:
                hi = mid
        return None

    def node_label(self, index: int) -> str:
        """Return the label of the node at ``index``."""
        t = self.table
        x = t.nodes[index]
        length = x & _mask(t.nodes_bits_text_length)
        x >>= t.nodes_bits_text_length
        offset = x & _mask(t.nodes_bits_text_offset)
        return t.text[offset : offset + length]