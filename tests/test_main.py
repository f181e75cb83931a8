"""Test of the ``python -m Ndcore`` walkthrough."""
from Ndcore.__main__ import main


def test_main_prints_each_step(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()

    headers = [i for i, line in enumerate(lines) if line.startswith("NDArray(")]
    assert [lines[i] for i in headers] == [
        "NDArray(3D, 24 elements, shape: 2x3x4)",
        "NDArray(2D, 24 elements, shape: 2x12)",
        "NDArray(2D, 24 elements, shape: 2x12)",
        "NDArray(2D, 24 elements, shape: 2x12)",
    ]
    bodies = [lines[i + 1].split() for i in headers]
    assert bodies == [["1"] * 24, ["1"] * 24, ["2"] * 24, ["1"] * 24]
