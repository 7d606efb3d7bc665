"""Package-manager conventions per platform family.

Every function here is pure: it only looks at the platform descriptor and
its arguments.
"""
import enum
import re

from .errors import UnsupportedPlatform
from .platform import parse_platform


class PlatformFamily(enum.Enum):
    EL = "el"
    DEBIAN = "debian"
    UNKNOWN = "unknown"


_EL_VARIANTS = re.compile(r"fedora|el|centos")
_DEBIAN_VARIANTS = re.compile(r"debian|ubuntu|cumulus")

PACKAGE_CONFIG_DIRS = {
    PlatformFamily.EL: "/etc/yum.repos.d/",
    PlatformFamily.DEBIAN: "/etc/apt/sources.list.d",
}

REPO_TYPES = {
    PlatformFamily.EL: "rpm",
    PlatformFamily.DEBIAN: "deb",
}


def normalize_variant(variant):
    """CentOS repos are published under the ``el`` name."""
    return "el" if variant == "centos" else variant


def fedora_prefix(variant):
    return "f" if variant == "fedora" else ""


def classify(platform):
    """Return the :class:`PlatformFamily` for a platform descriptor."""
    variant = normalize_variant(parse_platform(platform).variant)
    if _EL_VARIANTS.fullmatch(variant):
        return PlatformFamily.EL
    if _DEBIAN_VARIANTS.fullmatch(variant):
        return PlatformFamily.DEBIAN
    return PlatformFamily.UNKNOWN


def package_config_dir(platform):
    """
    Gets the config dir location for package information.

    Raises:
        UnsupportedPlatform: for platforms outside the EL and Debian families.
    """
    family = classify(platform)
    if family not in PACKAGE_CONFIG_DIRS:
        raise UnsupportedPlatform(f"package config dir unknown for platform '{platform}'")
    return PACKAGE_CONFIG_DIRS[family]


def repo_type(platform):
    """Gets the repo type (rpm|deb) for the platform."""
    family = classify(platform)
    if family not in REPO_TYPES:
        raise UnsupportedPlatform(f"repo type not known for platform '{platform}'")
    return REPO_TYPES[family]


def repo_filename(platform, package_name, build_version, is_pe=False):
    """
    Returns the repo filename for a given package & version for a platform.

    Args:
        platform: platform descriptor (string or Platform).
        package_name (str): Name of the package.
        build_version (str): Version string of the package.
        is_pe (bool): Whether the host runs the enterprise edition.

    Returns:
        str: e.g. ``pl-puppet-1.2.3-el-7-x86_64.repo`` or ``pl-puppet-1.2.3-jessie.list``.
    """
    platform = parse_platform(platform)
    variant, version, arch, codename = platform.to_array()
    variant = normalize_variant(variant)

    filename = f"pl-{package_name}-{build_version}-"
    family = classify(platform)
    if family is PlatformFamily.EL:
        pattern = "{}-{}{}-{}.repo"
        if is_pe:
            pattern = "repos-pe-" + pattern
        filename += pattern.format(variant, fedora_prefix(variant), version, arch)
    elif family is PlatformFamily.DEBIAN:
        filename += f"{codename or ''}.list"
    else:
        raise UnsupportedPlatform(
            f"repo filename pattern not known for platform '{platform}'"
        )
    return filename
