from .corpus import assemble, candidate_inputs, emit, generate_corpus
from .edges import EDGE_MASKS, edge_cases
from .errors import Error, OracleEncodingFailure, SerializationFailure
from .oracles import DEFAULT_ORACLES
from .rng import random_bytes
from .vectors import Corpus, TestRecord, build

__version__ = "0.1.0"
