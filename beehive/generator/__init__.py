from .shuffle import shuffle_letters, shuffle_spec
from .random_puzzle import generate_random_puzzle, random_puzzle_or_default, DEFAULT_PUZZLE
from .candidates import Candidate, iter_candidates, is_good_candidate

__all__ = ["shuffle_letters", "shuffle_spec", "generate_random_puzzle",
           "random_puzzle_or_default", "DEFAULT_PUZZLE",
           "Candidate", "iter_candidates", "is_good_candidate"]
