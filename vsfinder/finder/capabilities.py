"""
Capability probes for a Visual Studio installation.

Each probe inspects the installation's package ids and answers one question:
where is MSBuild, which VC++ toolset is installed, and which Windows SDK is
available. Only MSBuild consults the filesystem.
"""

import logging
import ntpath
from types import MappingProxyType
from typing import Iterable, Optional

from vsfinder.core.interfaces import FileSystemProbe, LocalFileSystem

logger = logging.getLogger(__name__)

MSBUILD_PACKAGE = "Microsoft.VisualStudio.VC.MSBuild.Base"
TOOLSET_PACKAGE = "Microsoft.VisualStudio.Component.VC.Tools.x86.x64"
EXPRESS_PACKAGE = "Microsoft.VisualStudio.WDExpress"
WIN8_SDK_PACKAGE = "Microsoft.VisualStudio.Component.Windows81SDK"
WIN10_SDK_PREFIX = "Microsoft.VisualStudio.Component.Windows10SDK."

TOOLSETS = MappingProxyType(
    {
        2017: "v141",
        2019: "v142",
        2022: "v143",
    }
)

# MSBuild directory name under <install>\MSBuild for versions that
# report the MSBuild package.
MSBUILD_SUBDIRS = MappingProxyType(
    {
        2017: "15.0",
        2019: "Current",
    }
)


def msbuild_path(install_path: str, subdir: str = "Current") -> str:
    """Build the MSBuild.exe path for an installation."""
    return ntpath.join(install_path, "MSBuild", subdir, "Bin", "MSBuild.exe")


def probe_msbuild(
    install_path: str,
    packages: Iterable[str],
    year: Optional[int],
    fs: Optional[FileSystemProbe] = None,
) -> Optional[str]:
    """
    Locate MSBuild for an installation.

    Args:
        install_path: Resolved installation root
        packages: Installed package ids
        year: Release year, or None if unknown
        fs: Filesystem probe (defaults to the local disk)

    Returns:
        Path to MSBuild.exe, or None if not available
    """
    if MSBUILD_PACKAGE in packages:
        logger.debug("- found VC.MSBuild.Base")
        subdir = MSBUILD_SUBDIRS.get(year)
        if subdir is not None:
            return msbuild_path(install_path, subdir)

    # VS2022 ships MSBuild without reporting the package.
    fallback = msbuild_path(install_path)
    fs = fs or LocalFileSystem()
    if fs.exists(fallback):
        return fallback
    return None


def probe_toolset(packages: Iterable[str], year: Optional[int]) -> Optional[str]:
    """
    Determine the VC++ platform toolset of an installation.

    Returns:
        Toolset name such as "v142", or None if no toolset is installed
        or the year has no known toolset
    """
    packages = set(packages)
    if TOOLSET_PACKAGE in packages:
        logger.debug("- found VC.Tools.x86.x64")
    elif EXPRESS_PACKAGE in packages:
        logger.debug("- found Visual Studio Express (looking for toolset)")
    else:
        return None

    toolset = TOOLSETS.get(year)
    if toolset is None:
        logger.debug(f"- invalid version year: {year}")
    return toolset


def probe_sdk(packages: Iterable[str]) -> Optional[str]:
    """
    Determine the newest desktop Windows SDK of an installation.

    Windows 10 SDK packages look like
    ``Microsoft.VisualStudio.Component.Windows10SDK.19041`` or
    ``...Windows10SDK.17763.Desktop``. Other suffixes (UWP, IpOverUsb)
    are not desktop SDKs.

    Returns:
        "10.0.<build>.0", "8.1", or None
    """
    packages = list(packages)
    newest = 0

    for package in packages:
        if not package.startswith(WIN10_SDK_PREFIX):
            continue

        parts = package.split(".")
        if len(parts) > 5 and parts[5] != "Desktop":
            logger.debug(f"- ignoring non-Desktop Win10SDK: {package}")
            continue

        number = parts[4] if len(parts) > 4 else ""
        if not (number.isascii() and number.isdecimal()):
            logger.debug(f"- failed to parse Win10SDK number: {package}")
            continue

        build = int(number, 10)
        logger.debug(f"- found Win10SDK: {build}")
        newest = max(newest, build)

    if newest:
        return f"10.0.{newest}.0"
    if WIN8_SDK_PACKAGE in packages:
        logger.debug("- found Win8SDK")
        return "8.1"
    return None
