from .aes_constants import S_BOX, INV_S_BOX, RCON
from .custom_aes import CustomAES
from .galois import xtime, gf_mul, mix_column, inv_mix_column
from .key_schedule import expand_key, round_keys, rounds_for_key
from .stdlib_aes import StdlibAES
