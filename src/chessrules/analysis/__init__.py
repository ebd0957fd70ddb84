"""Advisory analysis: oracle output parsing and evaluation models.

The Qt relay lives in :mod:`chessrules.analysis.qt_bridge` and is imported
explicitly by applications that run an oracle.
"""

from chessrules.analysis.models import Evaluation
from chessrules.analysis.oracle import OracleLineParser, analysis_commands

__all__ = [
    "Evaluation",
    "OracleLineParser",
    "analysis_commands",
]
