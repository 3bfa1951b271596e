# GUDID Utilities Package
# Supply-chain ingestion, filtering, aggregation and relationship graphs
from . import records
from . import filters
from . import aggregation
from . import relationship_graph

__version__ = "1.0.0"
