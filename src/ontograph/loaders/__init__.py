from ontograph.loaders.frame_loader import (
    LoadReport,
    load_graph_from_frames,
    load_graph_from_csv,
)

__all__ = [
    "LoadReport",
    "load_graph_from_frames",
    "load_graph_from_csv",
]
