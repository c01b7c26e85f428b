"""Union-Find query runner for the classic judge input format.

Input is a header line ``N Q`` followed by Q lines ``t u v``:
``t = 0`` merges u and v, ``t = 1`` asks whether they are connected.
"""

from dataclasses import dataclass
from enum import IntEnum
import logging

from cp_toolkit.structures.union_find import DisjointSetUnion

logger = logging.getLogger(__name__)


class QueryKind(IntEnum):
    UNITE = 0
    SAME = 1


class QueryFormatError(ValueError):
    """Raised when query input cannot be parsed."""


@dataclass(frozen=True)
class Query:
    kind: QueryKind
    u: int
    v: int


def yesno(flag: bool) -> str:
    """Return "Yes" or "No" for a boolean answer."""
    return "Yes" if flag else "No"


def _parse_ints(tokens: list[str], line_no: int) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise QueryFormatError(
            f"line {line_no}: expected integers, got {' '.join(tokens)!r}"
        ) from None


def parse_queries(text: str) -> tuple[int, list[Query]]:
    """Parse query input.

    Args:
        text: Whole input, header line first. Blank lines are ignored.

    Returns:
        Tuple of (n, queries)

    Raises:
        QueryFormatError: On a missing or malformed header, malformed query
            line, unknown query type, or when the number of query lines does
            not match Q.
    """
    lines = [(i, line.split()) for i, line in enumerate(text.splitlines(), start=1) if line.strip()]
    if not lines:
        raise QueryFormatError("missing header line 'N Q'")

    header_no, header = lines[0]
    if len(header) != 2:
        raise QueryFormatError(f"line {header_no}: header must be 'N Q'")
    n, q = _parse_ints(header, header_no)
    if n < 0 or q < 0:
        raise QueryFormatError(f"line {header_no}: N and Q must be non-negative")

    queries: list[Query] = []
    for line_no, tokens in lines[1:]:
        if len(tokens) != 3:
            raise QueryFormatError(f"line {line_no}: query must be 't u v'")
        t, u, v = _parse_ints(tokens, line_no)
        try:
            kind = QueryKind(t)
        except ValueError:
            raise QueryFormatError(f"line {line_no}: unknown query type {t}") from None
        queries.append(Query(kind=kind, u=u, v=v))

    if len(queries) != q:
        raise QueryFormatError(f"expected {q} queries, found {len(queries)}")

    logger.debug(f"Parsed {len(queries)} queries over {n} elements")
    return n, queries


def run_queries(n: int, queries: list[Query], answer_style: str = "digit") -> list[str]:
    """Run queries against a fresh DisjointSetUnion.

    Args:
        n: Number of elements
        queries: Parsed queries
        answer_style: "digit" for 1/0 answers, "yesno" for Yes/No

    Returns:
        One answer per SAME query, in input order

    Raises:
        IndexOutOfRangeError: If a query references an element outside [0, n)
        ValueError: If answer_style is unknown
    """
    if answer_style not in ("digit", "yesno"):
        raise ValueError(f"Unknown answer style: {answer_style}")

    dsu = DisjointSetUnion(n)
    answers: list[str] = []
    merges = 0
    for query in queries:
        if query.kind == QueryKind.UNITE:
            merges += dsu.union(query.u, query.v)
        else:
            connected = dsu.same(query.u, query.v)
            answers.append(yesno(connected) if answer_style == "yesno" else str(int(connected)))

    logger.debug(f"Ran {len(queries)} queries: {merges} merges, {dsu.num_groups()} groups left")
    return answers
