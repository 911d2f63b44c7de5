from cipherkit.aes import RCON, S_BOX, INV_S_BOX, gf_mul, inv_mix_column, mix_column, xtime


def test_xtime_sequence():
    # FIPS-197 section 4.2.1
    assert xtime(0x57) == 0xae
    assert xtime(0xae) == 0x47
    assert xtime(0x47) == 0x8e
    assert xtime(0x8e) == 0x07


def test_xtime_stays_in_a_byte():
    for x in range(256):
        assert 0 <= xtime(x) <= 0xff
        assert xtime(x) == gf_mul(x, 2)


def test_gf_mul_known_products():
    assert gf_mul(0x57, 0x83) == 0xc1
    assert gf_mul(0x57, 0x13) == 0xfe
    assert gf_mul(0x57, 0x01) == 0x57
    assert gf_mul(0x00, 0xff) == 0x00


def test_mix_column_known_columns():
    assert mix_column([0xdb, 0x13, 0x53, 0x45]) == [0x8e, 0x4d, 0xa1, 0xbc]
    assert mix_column([0xf2, 0x0a, 0x22, 0x5c]) == [0x9f, 0xdc, 0x58, 0x9d]
    assert mix_column([0x01, 0x01, 0x01, 0x01]) == [0x01, 0x01, 0x01, 0x01]
    assert mix_column([0xd4, 0xd4, 0xd4, 0xd5]) == [0xd5, 0xd5, 0xd7, 0xd6]
    assert mix_column([0x2d, 0x26, 0x31, 0x4c]) == [0x4d, 0x7e, 0xbd, 0xf8]


def _matrix_column(column, coefficients):
    # straight circulant matrix product, used as the reference
    out = []
    for i in range(4):
        value = 0
        for j in range(4):
            value ^= gf_mul(coefficients[(j - i) % 4], column[j])
        out.append(value)
    return out


def test_mix_column_matches_matrix_product(rng):
    for _ in range(500):
        column = [rng.randrange(256) for _ in range(4)]
        assert mix_column(column) == _matrix_column(column, (0x02, 0x03, 0x01, 0x01))
        assert inv_mix_column(column) == _matrix_column(column, (0x0e, 0x0b, 0x0d, 0x09))


def test_mix_column_round_trip(rng):
    for _ in range(2000):
        column = [rng.randrange(256) for _ in range(4)]
        assert inv_mix_column(mix_column(column)) == column
        assert mix_column(inv_mix_column(column)) == column


def test_round_constants():
    assert RCON == (0x8d, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36)


def test_sbox_tables_are_inverse_permutations():
    assert len(S_BOX) == 256
    assert sorted(S_BOX) == list(range(256))
    assert S_BOX[0x00] == 0x63
    assert S_BOX[0x53] == 0xed
    assert INV_S_BOX[0x63] == 0x00
    for x in range(256):
        assert INV_S_BOX[S_BOX[x]] == x
