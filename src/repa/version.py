from importlib.metadata import PackageNotFoundError, version

try:
    version = version("Repa")
except PackageNotFoundError:
    version = "0.0.0"
