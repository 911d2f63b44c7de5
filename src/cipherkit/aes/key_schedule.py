from .aes_constants import S_BOX, RCON

BLOCK_SIZE = 16

def rounds_for_key(key_length):
    # Nr = Nk + 6
    return key_length // 4 + 6

def _sub_word(word):
    return [S_BOX[b] for b in word]

def _rot_word(word):
    return word[1:] + word[:1]

def expand_key(key):
    """
    Run the Rijndael key expansion.

    Args:
        key: 16, 24 or 32 key bytes (length is validated by the caller)

    Returns:
        bytes: 16 * (Nr + 1) bytes, round key r at [16r, 16r + 16)
    """
    nk = len(key) // 4
    total_words = 4 * (rounds_for_key(len(key)) + 1)

    # the first Nk words are the key itself
    words = [list(key[4 * i:4 * i + 4]) for i in range(nk)]

    for i in range(nk, total_words):
        temp = list(words[i - 1])

        if i % nk == 0:
            temp = _sub_word(_rot_word(temp))
            temp[0] ^= RCON[i // nk]
        # extra substitution step for 256-bit keys
        elif nk > 6 and i % nk == 4:
            temp = _sub_word(temp)

        words.append([p ^ t for p, t in zip(words[i - nk], temp)])

    return bytes(b for word in words for b in word)

def round_keys(schedule):
    # split the schedule into block-sized round keys
    return [schedule[i:i + BLOCK_SIZE] for i in range(0, len(schedule), BLOCK_SIZE)]
