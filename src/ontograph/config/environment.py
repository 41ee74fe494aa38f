from __future__ import annotations

from dynaconf import Dynaconf

from ontograph.config.defaults import DEFAULTS
from ontograph.config.settings import GraphConfig, LoaderConfig, OntographConfig


def _parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_config(settings: Dynaconf | None = None) -> OntographConfig:
    """
    Build the root configuration from ONTOGRAPH_* environment variables
    (and a .env file, if present), falling back to DEFAULTS.
    """
    if settings is None:
        settings = Dynaconf(
            envvar_prefix="ONTOGRAPH",
            load_dotenv=True,
            settings_files=[],
        )

    def _get(key: str):
        return settings.get(key, DEFAULTS[key])

    return OntographConfig(
        graph=GraphConfig(
            implicit_node_registration=_parse_bool(_get("IMPLICIT_NODE_REGISTRATION")),
            reject_multiple_roots=_parse_bool(_get("REJECT_MULTIPLE_ROOTS")),
        ),
        loader=LoaderConfig(
            id_column=str(_get("LOADER_ID_COLUMN")),
            tail_column=str(_get("LOADER_TAIL_COLUMN")),
            head_column=str(_get("LOADER_HEAD_COLUMN")),
            label_column=str(_get("LOADER_LABEL_COLUMN")),
            accession_key=str(_get("LOADER_ACCESSION_KEY")),
        ),
    )
