import pytest

from geodetics.cli import main


def test_main_default(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert 'Source point:     N 5313937.778  E 6295607.862' in out
    assert 'Round trip point: N 5313937.778  E 6295607.862' in out
    assert '°' in out


def test_main_explicit_projection(capsys):
    assert main([
        '5984000', '500000', '--ellipsoid', 'wgs84',
        '--central-meridian', '39', '--false-easting', '500000', '--precision', '2'
    ]) == 0

    out = capsys.readouterr().out
    assert 'Source point:     N 5984000.00  E 500000.00' in out
    assert 'Round trip point: N 5984000.00  E 500000.00' in out
    assert '39°00\'00.000"E' in out


def test_main_invalid_zone(capsys):
    assert main(['--zone', '0']) == 1
    assert 'error:' in capsys.readouterr().err


def test_main_invalid_ellipsoid():
    with pytest.raises(SystemExit):
        main(['--ellipsoid', 'made up'])
