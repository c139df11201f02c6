import enum
import sys

from .paths import canonical_path, ensure_suffix, has_suffix, to_os_path

if sys.version_info < (3, 11):

    class StrEnum(str, enum.Enum):
        pass

else:

    class StrEnum(enum.StrEnum):
        pass
