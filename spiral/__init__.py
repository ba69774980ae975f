from .constants import *
from .exceptions import SplitterError
from .frequencies import FrequencyTable, score, load_dictionary, nltk_dictionary
from .config import SplitterConfig
from .simple_splitters import delimiter_split, naive_camelcase_split, safe_simple_split, simple_split
from .samurai import Samurai, samurai_split
from .potential_split import Expansion, Softword, PotentialSplit, find_best_split
from .gentest import GenTest, gentest_split, generate_potential_splits, find_expansions
from .expanders import Basic
