"""Top-level package for Image Formats.

Provides subpackages:
- image_formats.core – immutable value types (renditions, crop plans)
- image_formats.catalog – default rendition catalog and registration
- image_formats.geometry – cover-crop geometry resolver
- image_formats.picker – picker name merge policy
- image_formats.admin – media settings screen filter
- image_formats.images – Pillow reference resampler
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "1.1.4"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("image-formats")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
