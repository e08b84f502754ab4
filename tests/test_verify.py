from pidecs.verify import pi_digits_spigot, reference_digits, verify_digits


PI_50 = "314159265358979323846264338327950288419716939937510"


def test_spigot_prefix():
    g = pi_digits_spigot()
    assert "".join(str(next(g)) for _ in range(51)) == PI_50


def test_references_agree():
    assert reference_digits(300, "mpmath") == reference_digits(300, "spigot")
    assert reference_digits(0) == b""


def test_verify_reports_first_mismatch():
    good = bytes(int(c) for c in PI_50)
    assert verify_digits(good, 51, "spigot") == (True, "pi spigot", -1)
    bad = good[:7] + bytes([0]) + good[8:]
    assert verify_digits(bad, 51, "mpmath") == (False, "pi mpmath", 7)
    assert verify_digits(good, 0)[1] == "verification skipped"
