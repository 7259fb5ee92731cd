from dataclasses import dataclass

# Weight of an edge between a hull face and the outside node
HULL_EDGE_ESCAPE_WIDTH = 'escape-width'  # the face's own squared circumradius
HULL_EDGE_GAP = 'gap'                    # squared length of the hull edge
HULL_EDGE_WEIGHTS = (HULL_EDGE_ESCAPE_WIDTH, HULL_EDGE_GAP)

LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')
DEFAULT_LOG_LEVEL = 'WARNING'


@dataclass(frozen=True)
class EscapeConfig:
    """
    Preprocessing options for building the escape structure.

    Attributes:
        hull_edge_weight (str): How edges from hull faces to the outside node
            are weighted, one of HULL_EDGE_WEIGHTS.
        universal_escape_edge (bool): Connect every face to the outside node
            with an edge weighted by its escape width.
    """
    hull_edge_weight: str = HULL_EDGE_ESCAPE_WIDTH
    universal_escape_edge: bool = True

    def __post_init__(self):
        if self.hull_edge_weight not in HULL_EDGE_WEIGHTS:
            raise ValueError(
                f"Unknown hull edge weight '{self.hull_edge_weight}', expected one of {HULL_EDGE_WEIGHTS}"
            )
