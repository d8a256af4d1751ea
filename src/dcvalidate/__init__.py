"""dcvalidate - Validate devcontainer.json files for CI pipelines.

dcvalidate checks that a devcontainer.json declares the required VS Code
extensions, build/test/run tasks and devcontainer features, and reports the
first violation found.
"""

__version__ = "0.1.0"
__description__ = "Validate devcontainer.json extensions, tasks and features"

from dcvalidate.config import Requirements, ValidatorConfig

__all__ = [
    "__version__",
    "__description__",
    "Requirements",
    "ValidatorConfig",
]
