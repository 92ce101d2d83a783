"""Internal constants shared across the library."""

#: Directory (relative to the root path) that holds the persistor directory.
DEFAULT_DIRPATH = "Desktop"
#: Name of the directory created for the command log.
DEFAULT_DIRNAME = "MYRADIS_PERSISTOR"
#: File name of the append-only command log inside the persistor directory.
DEFAULT_LOG_FILE_NAME = "snapshot"

# ------------------------------------------------------------------
# Error codes carried on StoreError.code
# ------------------------------------------------------------------

CODE_NOT_FOUND = 404
CODE_CONFLICT = 409
CODE_GENERIC = -1
