DEFAULTS = {
    # Application title reported by the API
    "APP_NAME": "graphalgebra-backend",
    # Prefix for every API route
    "API_PREFIX": "",
    # Directedness of request graphs that do not say
    "GRAPH_DEFAULT_DIRECTED": False,
    # Largest accepted matrix (containment ordering is brute force)
    "GRAPH_MAX_VERTICES": 256,
    # Token printed for absent edges
    "RENDER_ABSENT_TOKEN": "X",
    # Separator between rendered cells
    "RENDER_SEPARATOR": " ",
    # Prefix each rendered row with its vertex index
    "RENDER_ROW_LABELS": True,
    # Log level for the run script
    "LOG_LEVEL": "INFO",
}
