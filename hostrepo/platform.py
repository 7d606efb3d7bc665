"""Platform descriptors for target hosts.

A descriptor is a string of the form ``variant-version-arch``, for example
``el-7-x86_64``, ``ubuntu-14.04-amd64`` or ``debian-jessie-i386``. The
Debian-family variants also carry a release codename that is looked up from
the version (or taken from the descriptor when the codename was used in
place of the version).
"""
import re
from typing import Optional, Tuple

from .errors import UnsupportedPlatform

PLATFORMS = (
    "osx", "centos", "fedora", "debian", "oracle", "redhat", "redhatfips",
    "scientific", "sles", "ubuntu", "windows", "solaris", "aix", "archlinux",
    "el", "eos", "cumulus", "f5", "netscaler", "cisco_nexus", "cisco_ios_xr",
    "huaweios", "freebsd", "openbsd",
)

PLATFORM_REGEX = re.compile(r"^(%s)-.+-.+$" % "|".join(PLATFORMS))

# version (dots removed) -> codename
PLATFORM_VERSION_CODES = {
    "debian": {
        "6": "squeeze",
        "7": "wheezy",
        "8": "jessie",
        "9": "stretch",
        "10": "buster",
        "11": "bullseye",
        "12": "bookworm",
        "13": "trixie",
    },
    "ubuntu": {
        "1004": "lucid",
        "1204": "precise",
        "1210": "quantal",
        "1304": "raring",
        "1310": "saucy",
        "1404": "trusty",
        "1410": "utopic",
        "1504": "vivid",
        "1510": "wily",
        "1604": "xenial",
        "1610": "yakkety",
        "1704": "zesty",
        "1804": "bionic",
        "2004": "focal",
        "2204": "jammy",
        "2404": "noble",
    },
    "cumulus": {
        "2.2": "cumulus",
    },
}


class Platform:
    """An immutable, parsed platform descriptor."""

    __slots__ = ("_name", "variant", "version", "arch", "codename")

    def __init__(self, name: str):
        if not name or not PLATFORM_REGEX.match(name):
            raise UnsupportedPlatform(
                f"Platform '{name}' is not a valid platform "
                f"(expected <variant>-<version>-<arch> with a variant in {', '.join(PLATFORMS)})"
            )
        variant, version, arch = name.split("-", 2)
        codename = None

        version_codes = PLATFORM_VERSION_CODES.get(variant)
        if version_codes:
            codename_versions = {v: k for k, v in version_codes.items()}
            if version in codename_versions:
                codename = version
                version = codename_versions[version]
            else:
                codename = version_codes.get(version.replace(".", "")) or version_codes.get(version)

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "variant", variant)
        object.__setattr__(self, "version", version)
        object.__setattr__(self, "arch", arch)
        object.__setattr__(self, "codename", codename)

    def __setattr__(self, key, value):
        raise AttributeError(f"Platform is immutable, cannot set '{key}'")

    def to_array(self) -> Tuple[str, str, str, Optional[str]]:
        return self.variant, self.version, self.arch, self.codename

    def matches(self, pattern) -> bool:
        return re.search(pattern, self._name) is not None

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"Platform({self._name!r})"

    def __eq__(self, other):
        if isinstance(other, Platform):
            return self._name == other._name
        if isinstance(other, str):
            return self._name == other
        return NotImplemented

    def __hash__(self):
        return hash(self._name)


def parse_platform(descriptor) -> Platform:
    """Return ``descriptor`` as a :class:`Platform`, parsing it if needed."""
    if isinstance(descriptor, Platform):
        return descriptor
    return Platform(descriptor)
