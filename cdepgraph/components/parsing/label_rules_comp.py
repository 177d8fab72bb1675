"""Naming-convention rules applied to function labels.

The embedded C code bases these graphs come from name functions
``<MODULE>_<Function>[_<more>]``. Public API functions start with an upper-case
letter after the module prefix (``BMS_GetState``), module-private helpers with
a lower-case one (``BMS_checkLimits``). Functions without any underscore belong
to the operating system layer and are bucketed under ``RTOS``.

All functions here are pure and operate on the label string only.
"""

from __future__ import annotations

from cdepgraph.helpers.dto.graph_dto import RTOS_MODULE_PREFIX

SEPARATOR = "_"


def module_prefix(label: str) -> str:
    """
    Return the module prefix of a label.

    Examples:
        >>> module_prefix("BAL_funcA")
        'BAL'
        >>> module_prefix("vTaskDelay")
        'RTOS'
        >>> module_prefix("_foo_bar")
        ''
    """
    if SEPARATOR not in label:
        return RTOS_MODULE_PREFIX
    # A leading underscore yields an empty prefix; such nodes stay ungrouped
    return label[: label.index(SEPARATOR)]


def function_name(label: str) -> str | None:
    """
    Return the segment after the module prefix, up to the next underscore.

    Returns None when the label has no module prefix (no underscore, or a
    leading underscore).

    Examples:
        >>> function_name("DIAG_Handler")
        'Handler'
        >>> function_name("CONT_get_state")
        'get'
        >>> function_name("vTaskDelay") is None
        True
    """
    if SEPARATOR not in label or label.startswith(SEPARATOR):
        return None
    remainder = label[label.index(SEPARATOR) + 1 :]
    return remainder.split(SEPARATOR, 1)[0]


def is_public(label: str) -> bool:
    """True unless the function name after the prefix starts lower-case."""
    if SEPARATOR not in label:
        return True
    if label.startswith(SEPARATOR):
        return True
    name = function_name(label)
    if not name:
        # "MOD_" or "MOD__x": nothing to inspect
        return True
    return not name[0].islower()


def is_root(label: str, graph_name: str | None) -> bool:
    """The generator names each graph after the function it was drawn for."""
    return graph_name is not None and label == graph_name
