"""Verify package imports work correctly."""


def test_import_javaprint() -> None:
    """Test that javaprint can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import javaprint

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert javaprint.__version__ == expected


def test_version_format() -> None:
    from javaprint import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import javaprint

    for name in javaprint.__all__:
        assert hasattr(javaprint, name), name
