import random
from typing import List

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DISJOINT_FIVE = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY"]


def random_word_list(seed: int, partitions: int = 4, noise: int = 40) -> List[str]:
    """Random five-letter words with a few planted 25-letter solutions."""

    rng = random.Random(seed)
    words: List[str] = []
    for _ in range(partitions):
        letters = list(ALPHABET)
        rng.shuffle(letters)
        words.extend("".join(letters[i:i + 5]) for i in range(0, 25, 5))
    for _ in range(noise):
        words.append("".join(rng.sample(ALPHABET, 5)))
    # A few words with repeated letters that must be ignored.
    words.extend(["LLAMA", "GEESE", "ABBEY"])
    rng.shuffle(words)
    return words
