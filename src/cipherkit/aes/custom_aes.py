import logging

from ..base import BlockCipher
from ..registry import register_cipher
from .aes_constants import S_BOX, INV_S_BOX
from .galois import mix_column, inv_mix_column
from .key_schedule import expand_key, round_keys, rounds_for_key

logger = logging.getLogger("CipherKit")


@register_cipher("aes")
class CustomAES(BlockCipher):

    name = "AES"
    block_size = 16
    key_sizes = (16, 24, 32)

    def __init__(self, key):

        key = bytes(key)

        # validate key size
        self.validate_key(key)

        self.key_size = len(key)
        self.rounds = rounds_for_key(self.key_size)

        # generate key schedule once during initialization
        self.key_schedule = expand_key(key)

        # round keys are kept as state matrices, read-only after this point
        self._round_keys = tuple(
            self._bytes_to_state(round_key) for round_key in round_keys(self.key_schedule)
        )

        logger.debug(f"Expanded AES-{self.key_size * 8} key schedule ({self.rounds} rounds)")

    @staticmethod
    def _bytes_to_state(data):
        # column-major: byte k sits at row k % 4, column k // 4
        return [[data[row + 4 * col] for col in range(4)] for row in range(4)]

    @staticmethod
    def _state_to_bytes(state):
        return bytes(state[row][col] for col in range(4) for row in range(4))

    @staticmethod
    def _sub_bytes(state, box):
        for row in state:
            row[:] = [box[b] for b in row]

    @staticmethod
    def _shift_rows(state):
        # row r rotates left by r
        for r in range(1, 4):
            state[r] = state[r][r:] + state[r][:r]

    @staticmethod
    def _inv_shift_rows(state):
        for r in range(1, 4):
            state[r] = state[r][-r:] + state[r][:-r]

    @staticmethod
    def _mix_columns(state, mix):
        for col in range(4):
            column = mix([state[row][col] for row in range(4)])
            for row in range(4):
                state[row][col] = column[row]

    def _add_round_key(self, state, round_num):
        round_key = self._round_keys[round_num]
        for row in range(4):
            state_row = state[row]
            key_row = round_key[row]
            for col in range(4):
                state_row[col] ^= key_row[col]

    def encrypt_block(self, plaintext):

        self.check_block(plaintext)

        # the state is a fresh matrix, the caller's buffer is never touched
        state = self._bytes_to_state(plaintext)

        # initial round key addition
        self._add_round_key(state, 0)

        # main rounds
        for round_num in range(1, self.rounds):
            self._sub_bytes(state, S_BOX)
            self._shift_rows(state)
            self._mix_columns(state, mix_column)
            self._add_round_key(state, round_num)

        # final round has no column mixing
        self._sub_bytes(state, S_BOX)
        self._shift_rows(state)
        self._add_round_key(state, self.rounds)

        return self._state_to_bytes(state)

    def decrypt_block(self, ciphertext):

        self.check_block(ciphertext)

        state = self._bytes_to_state(ciphertext)

        self._add_round_key(state, self.rounds)

        # main rounds in reverse
        for round_num in range(self.rounds - 1, 0, -1):
            self._inv_shift_rows(state)
            self._sub_bytes(state, INV_S_BOX)
            self._add_round_key(state, round_num)
            self._mix_columns(state, inv_mix_column)

        # final round
        self._inv_shift_rows(state)
        self._sub_bytes(state, INV_S_BOX)
        self._add_round_key(state, 0)

        return self._state_to_bytes(state)
