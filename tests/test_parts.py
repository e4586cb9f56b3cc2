from pathlib import Path

import pytest

from asciirocket.errors import PartsError
from asciirocket.parts import PART_KINDS, default_parts, load_parts


def test_bundled_catalogue_loads() -> None:
    parts = default_parts()
    assert {"tip", "mast", "nose_cone", "fins", "engine", "wide_engine", "trail"} <= set(parts)
    assert all(p.kind in PART_KINDS for p in parts.values())
    assert parts["nose_cone"].shape == ("/'\\",)
    assert parts["engine"].shape == ("'─'",)
    assert parts["puff"].shape == ("'",)
    assert parts["fins"].height == 2
    assert (parts["shoulder"].top_width, parts["shoulder"].bottom_width) == (1, 3)
    assert parts["nose_wide"].shape == ("/'\\", "/   \\")
    assert (parts["nose_wide"].top_width, parts["nose_wide"].bottom_width) == (0, 3)
    assert parts["waist"].shape == ("\\   /",)
    assert parts["fuselage_fins"].shape == ("/│ │\\",)
    assert len(parts) == 23


def test_default_parts_is_cached_and_read_only() -> None:
    assert default_parts() is default_parts()
    with pytest.raises(TypeError):
        default_parts()["tip"] = default_parts()["mast"]  # type: ignore[index]


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "parts.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_load_custom_catalogue(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "parts:\n"
        "  dot:\n"
        "    kind: exhaust\n"
        "    shape: ['.']\n",
    )
    parts = load_parts(path)
    assert parts["dot"].shape == (".",)
    assert parts["dot"].top_width == 0


def test_missing_catalogue(tmp_path: Path) -> None:
    with pytest.raises(PartsError, match="does not exist"):
        load_parts(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text, message",
    [
        ("- a\n- b\n", "top level"),
        ("parts: {}\n", "non-empty `parts`"),
        ("parts:\n  x:\n    kind: wing\n    shape: ['x']\n", "unknown kind"),
        ("parts:\n  x:\n    kind: body\n    shape: []\n", "non-empty list"),
        ("parts:\n  x:\n    kind: body\n    shape: ['  ']\n", "blank"),
        ("parts:\n  x:\n    kind: body\n    shape: ['x']\n    top: -1\n", "non-negative"),
        ("parts:\n  x:\n    kind: body\n    shape: ['x']\n    top: yes\n", "non-negative"),
        ("parts: [\n", "not valid YAML"),
    ],
)
def test_malformed_catalogue(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(PartsError, match=message):
        load_parts(_write(tmp_path, text))
