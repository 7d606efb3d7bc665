from .candidates import candidates
from .config import config
from .config_dir import config_dir
from .log import log
from .noask import noask
from .repo_filename import repo_filename
from .repo_path import repo_path
from .repo_type import repo_type
from .version import version
