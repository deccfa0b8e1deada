"""Loading of NFS export documents from YAML or JSON files."""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from powerscale_models.exceptions import DocumentLoadError
from powerscale_models.models import NfsExportResource

logger = logging.getLogger(__name__)


def load_document(path: Union[str, Path]) -> dict:
    """Read a YAML (or JSON) mapping from ``path``."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise DocumentLoadError(str(path), e) from e

    if not isinstance(data, dict):
        raise DocumentLoadError(
            str(path), TypeError(f"expected a mapping, got {type(data).__name__}")
        )
    logger.debug("Loaded %d top-level keys from %s", len(data), path)
    return data


def load_nfs_export(path: Union[str, Path]) -> NfsExportResource:
    """Load and validate an NFS export document."""
    data = load_document(path)
    try:
        return NfsExportResource.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(str(path), e) from e
