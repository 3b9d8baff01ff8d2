"""Schema-less decoding of raw transaction call data."""

from importlib import metadata


def __getattr__(name: str) -> str:
    """Expose the package version via ``calldecoder.__version__``."""
    if name == "__version__":
        try:
            return metadata.version("calldecoder")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = ["__version__"]
