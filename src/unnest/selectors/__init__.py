from unnest.selectors.algebra import (
    GROUPING_PSEUDO,
    NESTING_TOKEN,
    ancestor_text,
    check_nesting_token,
    combine,
    split_selector_list,
)

__all__ = [
    "NESTING_TOKEN",
    "GROUPING_PSEUDO",
    "ancestor_text",
    "check_nesting_token",
    "combine",
    "split_selector_list",
]
