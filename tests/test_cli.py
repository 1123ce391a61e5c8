import pytest

from arraykit.arrays import rotate
from arraykit.cli import main
from arraykit.number_theory import primes_up_to


def test_rotate_command(capsys):
    values = [1, 2, 3, 4, 5]
    status = main(["rotate", "-k", "2", *map(str, values)])
    out = capsys.readouterr().out
    expected = " ".join(map(str, rotate(values, 2)))
    assert status == 0
    assert out.strip() == f"Rotated array: {expected}"


def test_rotate_accepts_negative_values(capsys):
    main(["rotate", "-k", "1", "3", "-4", "5"])
    out = capsys.readouterr().out
    expected = " ".join(map(str, rotate([3, -4, 5], 1)))
    assert out.strip() == f"Rotated array: {expected}"


def test_primes_command(capsys):
    main(["primes", "30"])
    lines = capsys.readouterr().out.splitlines()
    primes = primes_up_to(30)
    assert lines[0] == ", ".join(map(str, primes))
    assert lines[1] == f"Count of primes = {len(primes)}"


def test_sort_command(capsys):
    values = [9, -1, 4, 4, 0]
    main(["sort", *map(str, values)])
    out = capsys.readouterr().out
    assert [int(token) for token in out.split()] == sorted(values)


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])


def test_non_integer_argument():
    with pytest.raises(SystemExit):
        main(["primes", "ten"])