"""Filter summary logic for reports."""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


def render_filter_value(value: Any) -> Optional[str]:
    """
    Render one filter value for the filter block.

    Args:
        value: Scalar or list of scalars as received from the request

    Returns:
        The display string, or None when the value is empty and the entry
        must be dropped
    """
    if value is None:
        return None

    if isinstance(value, (list, tuple)):
        items = [render_filter_value(v) for v in value]
        items = [v for v in items if v is not None]
        return ", ".join(items) if items else None

    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)

    if not text.strip():
        return None
    return text


def prune_filters(filters: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Drop empty entries and join list values, keeping insertion order.

    The result is what the filter block renders, one line per entry.
    """
    if not filters:
        return []

    entries = []
    for label, value in filters.items():
        rendered = render_filter_value(value)
        if rendered is None:
            continue
        entries.append((str(label), rendered))
    return entries


def filter_block_size(filters: Optional[Mapping[str, Any]]) -> int:
    """Number of grid lines the filter block occupies (0 when omitted)."""
    count = len(prune_filters(filters))
    if count == 0:
        return 0
    # "Filters" heading + entries + blank separator
    return count + 2


def label_filters(
    filter_labels: Mapping[Union[str, Tuple[str, ...]], Union[str, Tuple[str, Any]]],
    params: Mapping[str, Any],
    with_defaults: bool = True,
) -> Dict[str, Any]:
    """
    Translate raw request parameters into a labelled filter set.

    Args:
        filter_labels: Ordered mapping of request parameter -> display label.
            A tuple key lists alternative parameter names; the first one
            present in ``params`` wins. A ``(label, default)`` value supplies
            the value used when none of the parameters is present.
        params: Raw request parameters (query string values)
        with_defaults: Fill absent parameters from the declared defaults

    Returns:
        Ordered mapping of label -> value, in label order. Parameters the
        variant does not know about are ignored; empty ones are kept here and
        dropped later by prune_filters.
    """
    labelled = {}
    for param, label in filter_labels.items():
        names = param if isinstance(param, tuple) else (param,)
        default = None
        if isinstance(label, tuple):
            label, default = label
        value = default if with_defaults else None
        for name in names:
            if name in params:
                value = params[name]
                break
        labelled[label] = value
    return labelled
