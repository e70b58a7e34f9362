"""
Intercepts import errors concerning optional dependencies so the user is told which
tileproximity extra provides them, or (if permitted) has them pip installed.
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Dict, Union

from tileproximity.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    A meta path finder consulted after every other finder has failed. Only packages
    registered through .permit_packages() are handled; anything else falls through to
    the usual ModuleNotFoundError.

    Register it once, in the package's root __init__.py:

        ConditionalPackageInterceptor.permit_packages({'pyproj': 'tileproximity[proj]'})
        sys.meta_path.append(ConditionalPackageInterceptor)
    """

    PERMITTED_PACKAGES: Dict[str, str] = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages.

        Args:
            packages (Union[list, dict]):
                Either a list of names, installed exactly as listed, or a mapping of
                import name to pip requirement, e.g. {'pyproj': 'tileproximity[proj]'}

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether packages may be auto-downloaded or not. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once every other finder has failed to locate `name`.
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        if cls.AUTO_DOWNLOAD:
            LOGGER.warning('Module %r not installed. Attempting to pip install...', name)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', cls.PERMITTED_PACKAGES[name]],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"You are attempting to use a feature which requires an optional installation "
            f"({name}). Either install it yourself:\n"
            f"    pip install {cls.PERMITTED_PACKAGES[name]}\n"
            "or enable auto-installation in your entrypoint:\n"
            "    from tileproximity.utils.conditional_imports import "
            "ConditionalPackageInterceptor\n"
            "    ConditionalPackageInterceptor.permit_auto_download(True)"
        )
