"""Mapping between flat GridSettings fields and sectioned TOML profiles.

GridSettings stays a flat Pydantic model; profiles group its fields:

    [common]             display_crs, show_zone_labels, unknown keys
    [interval]           ladder
    [styles]             zone_line, grid_line, labels
"""

from __future__ import annotations

# {section_name: {flat_field_name: short_name_in_toml}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'interval': {
        'interval_ladder': 'ladder',
    },
    'styles': {
        'zone_line_style': 'zone_line',
        'grid_line_style': 'grid_line',
        'label_styles': 'labels',
    },
}

COMMON_SECTION = 'common'

# flat_field -> (section, short_name)
_SECTION_OF: dict[str, tuple[str, str]] = {
    flat: (section, short)
    for section, fields in SECTION_MAP.items()
    for flat, short in fields.items()
}


def flat_to_sectioned(flat: dict) -> dict:
    """Group a flat GridSettings dump into TOML sections."""
    result: dict = {COMMON_SECTION: {}}
    for key, value in flat.items():
        section, name = _SECTION_OF.get(key, (COMMON_SECTION, key))
        result.setdefault(section, {})[name] = value
    return result


def sectioned_to_flat(data: dict) -> dict:
    """
    Flatten a parsed profile for GridSettings validation.

    Known sections get their short names expanded; ``[common]``, unknown
    sections and top-level keys (old flat profiles) pass through as is.
    """
    flat: dict = {}
    for key, value in data.items():
        if not isinstance(value, dict) or key in _SECTION_OF:
            flat[key] = value
            continue
        fields = SECTION_MAP.get(key, {})
        names = {short: flat_name for flat_name, short in fields.items()}
        for name, field_value in value.items():
            flat[names.get(name, name)] = field_value
    return flat
