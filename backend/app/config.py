from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from graphalgebra.config.settings import (
    GraphConfig,
    RenderConfig,
    GraphAlgebraConfig,
)

settings = Dynaconf(
    envvar_prefix="GRAPHALGEBRA",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key: str):
    return settings.get(key, DEFAULTS[key])


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = _setting("APP_NAME")
    api_prefix: str = _setting("API_PREFIX")
    log_level: str = _setting("LOG_LEVEL")

    # ---------------- Graph Policy ----------------
    graphalgebra: GraphAlgebraConfig = GraphAlgebraConfig(
        graph=GraphConfig(
            default_directed=_setting("GRAPH_DEFAULT_DIRECTED"),
            max_vertices=_setting("GRAPH_MAX_VERTICES"),
        ),
        render=RenderConfig(
            absent_token=_setting("RENDER_ABSENT_TOKEN"),
            separator=_setting("RENDER_SEPARATOR"),
            row_labels=_setting("RENDER_ROW_LABELS"),
        ),
    )
