import os

from PIL import Image

from maze_adventure.cli import main


def test_solve_prints_maze(capsys):
    assert main(['solve', '--seed', '5']) == 0
    out = capsys.readouterr().out
    assert 'Path found' in out
    assert '+---+' in out


def test_solve_hard(capsys):
    assert main(['solve', '--difficulty', 'hard', '--seed', '1']) == 0
    assert '20x20' in capsys.readouterr().out


def test_export_writes_images(tmp_path):
    assert main(['export', '--count', '3', '--difficulty', 'medium', '--seed', '2',
                 '--output', str(tmp_path)]) == 0
    names = sorted(os.listdir(tmp_path))
    assert names == ['maze_15x15_001.png', 'maze_15x15_002.png', 'maze_15x15_003.png']
    with Image.open(tmp_path / names[0]) as image:
        assert image.format == 'PNG'


def test_export_same_seed_same_image(tmp_path):
    for name in ('a', 'b'):
        assert main(['export', '--seed', '9', '--output', str(tmp_path / name)]) == 0
    with Image.open(tmp_path / 'a' / 'maze_10x10_001.png') as a, Image.open(tmp_path / 'b' / 'maze_10x10_001.png') as b:
        assert a.tobytes() == b.tobytes()


def test_bad_difficulty_exit_code(capsys):
    assert main(['solve', '--difficulty', '12']) == 1
    assert 'Unsupported difficulty' in capsys.readouterr().out


def test_bad_count_exit_code(tmp_path, capsys):
    assert main(['export', '--count', '0', '--output', str(tmp_path)]) == 1
    assert '--count' in capsys.readouterr().out
