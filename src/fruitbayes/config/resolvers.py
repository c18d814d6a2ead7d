# config/resolvers.py
from pathlib import Path
from typing import Optional, Union
from platformdirs import user_log_dir

from fruitbayes.domain.exceptions import DataFileNotFoundError

APP = "fruitbayes"

def default_log_dir() -> Path:
    return Path(user_log_dir(APP))

def resolve_training_path(path: Optional[Union[str, Path]]) -> Path:
    """Resolve and check the training data file."""
    if not path:
        raise DataFileNotFoundError("<unset>").add_suggestion(
            "Provide the training data CSV with --training"
        )
    p = Path(path).expanduser()
    if not p.is_file():
        raise DataFileNotFoundError(str(p))
    return p.resolve()
