"""
Levenshtein edit distance.

Counts single-character inserts, deletes and substitutions over code points.
Keeps one row of the DP table instead of the full matrix.
"""


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between two strings.
    
    :param a: Source string
    :param b: Target string
    :return: Minimum number of single-character edits turning a into b
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    
    # cache[i] holds the distance between a[:i + 1] and the prefix of b seen so far
    cache = list(range(1, len(a) + 1))
    result = 0
    
    for index_b, code_b in enumerate(b):
        result = index_b
        diagonal = index_b
        
        for index_a, code_a in enumerate(a):
            substitution = diagonal if code_a == code_b else diagonal + 1
            diagonal = cache[index_a]
            
            if diagonal > result:
                result = result + 1 if substitution > result else substitution
            else:
                result = diagonal + 1 if substitution > diagonal else substitution
            
            cache[index_a] = result
    
    return result


def _fold(text: str) -> str:
    return text.lower().replace("'", "").replace("-", " ").replace("_", " ")


def levenshtein_insensitive(a: str, b: str) -> int:
    """
    Edit distance ignoring case and apostrophes, with dashes and underscores read as spaces.
    """
    return levenshtein(_fold(a), _fold(b))
