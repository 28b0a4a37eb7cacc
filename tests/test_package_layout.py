# Tests for verifying the package skeleton is importable and documented.

import importlib
import pkgutil

import qanexus


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert qanexus.__doc__ and qanexus.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(qanexus.__path__, qanexus.__name__ + "."):
        if module_info.name.endswith("__main__"):
            continue
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"
