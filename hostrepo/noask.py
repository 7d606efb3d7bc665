from .errors import UnsupportedPlatform
from .platform import parse_platform

SOLARIS_10_NOASK = """\
# Write the noask file to a temporary directory
# please see man -s 4 admin for details about this file:
# http://www.opensolarisforum.org/man/man4/admin.html
#
# The key thing we don't want to prompt for are conflicting files.
# The other nocheck settings are mostly defensive to prevent prompts
# We _do_ want to check for available free space and abort if there is
# not enough
mail=
# Overwrite already installed instances
instance=overwrite
# Do not bother checking for partially installed packages
partial=nocheck
# Do not bother checking the runlevel
runlevel=nocheck
# Do not bother checking package dependencies (We take care of this)
idepend=nocheck
rdepend=nocheck
# DO check for available free space and abort if there isn't enough
space=quit
# Do not check for setuid files.
setuid=nocheck
# Do not check if files conflict with other packages
conflict=nocheck
# We have no action scripts.  Do not check for them.
action=nocheck
# Install to the default base directory.
basedir=default
"""

NOASK_FILES = {
    ("solaris", "10"): SOLARIS_10_NOASK,
}


def noask_text(platform):
    """Returns the noask admin file text for Solaris hosts."""
    platform = parse_platform(platform)
    variant, version, _, _ = platform.to_array()
    try:
        return NOASK_FILES[(variant, version)]
    except KeyError:
        raise UnsupportedPlatform(f"noask file text unknown for platform '{platform}'") from None
