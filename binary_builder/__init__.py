from .catalog import ResourceCatalog, ResourceRecord
from .config import BuildConfig
from .encoding import ByteArrayEncoder, EncodedPayload
from .errors import BuildError, BuildResult, FailureReason
from .filesystem import FileHandle, FileSystem, LocalFileSystem
from .identifiers import identifier_for, sanitize_identifier
from .pipeline import build
from .scanning import is_hidden_file

__version__ = "0.1.0"
