"""
Wordle-style feedback for a single (guess, answer) pair.

Conventions:
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = correct letter in the wrong position
  - '-' : gray   = letter not present (or present fewer times than guessed)

The engine never calls this; it consumes GuessState. The simulation
harness and the interactive app use it to play the role of the game.

Two passes, duplicate-safe:
  1) mark greens and count the answer's unmatched letters
  2) mark yellows only while the letter still has unmatched count left
"""

from collections import Counter

from .letters import parse_word

ALL_GREEN = "GGGGG"


def feedback_pattern(guess: str, answer: str) -> str:
    """
    Compute the G/Y/- pattern for `guess` against `answer`.

    Examples:
      feedback_pattern("belle", "level") -> "-GYYY"
      feedback_pattern("lemon", "level") -> "GG---"
    """
    guess = parse_word(guess)
    answer = parse_word(answer)

    pattern = ["-"] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)
