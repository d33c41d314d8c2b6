# cli/path_utils.py

import os

DATA_DIR_ENV_VAR = "STUDENT_RECORDS_DIR"


def get_default_data_dir() -> str:
    """
    Returns the default location for stored student records: `~/Documents/StudentRecords`.
    """
    documents = os.path.join(os.path.expanduser("~"), "Documents")
    return os.path.join(documents, "StudentRecords")


def get_data_dir(user_input: str | None) -> str:
    """
    Resolves the data directory from user input, falling back to the default location.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        An absolute path string with `~` expanded.
    """
    if user_input is not None and user_input.strip():
        return os.path.abspath(os.path.expanduser(user_input.strip()))
    else:
        return get_default_data_dir()


def resolve_data_dir(dir_input: str | None) -> str:
    """
    Produces and ensures a valid data directory for the persistence gateway.

    Args:
        dir_input (str | None): An optional directory path string. If None, the default path is used.

    Returns:
        A fully resolved directory path that exists on disk.

    Notes:
        - Creates the directory path (including parent directories) if it does not exist.
    """
    data_dir = get_data_dir(dir_input)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir


def data_dir_from_env() -> str | None:
    """Returns the directory named by `STUDENT_RECORDS_DIR`, or None if the variable is unset or blank."""
    value = os.getenv(DATA_DIR_ENV_VAR, "").strip()
    return value or None
