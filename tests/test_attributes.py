from svgx.convert.attributes import ATTRIBUTE_RENAMES, to_component_dialect, to_markup_dialect


def test_to_component_dialect_renames_mapped_attributes() -> None:
    svg = '<svg class="a"><path stroke-width="2" fill-rule="evenodd" fill="red"/></svg>'
    assert to_component_dialect(svg) == (
        '<svg className="a"><path strokeWidth="2" fillRule="evenodd" fill="red"/></svg>'
    )


def test_to_markup_dialect_restores_names() -> None:
    jsx = '<use xlinkHref="#a" strokeLinecap="round"/>'
    assert to_markup_dialect(jsx) == '<use xlink:href="#a" stroke-linecap="round"/>'


def test_round_trip_over_full_table() -> None:
    markup = "<g " + " ".join(f'{m}="1"' for m, _ in ATTRIBUTE_RENAMES) + "/>"
    jsx = to_component_dialect(markup)
    for markup_name, component_name in ATTRIBUTE_RENAMES:
        assert f" {component_name}=" in jsx
    assert to_markup_dialect(jsx) == markup


def test_leading_whitespace_becomes_single_space() -> None:
    assert to_component_dialect('<path\n  stroke-width="1"/>') == '<path\n  strokeWidth="1"/>'
    assert to_component_dialect('<path\nstroke-width="1"/>') == '<path strokeWidth="1"/>'


def test_requires_whitespace_before_name() -> None:
    s = '<path data-stroke-width="1"/>'
    assert to_component_dialect(s) == s


def test_blank_input() -> None:
    assert to_component_dialect("   ") == ""
    assert to_markup_dialect("") == ""
