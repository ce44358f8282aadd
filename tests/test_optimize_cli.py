import optimize


def test_parse_defaults():
    args = optimize.parse_arguments([])
    assert args.generations == 50
    assert args.population == 30
    assert args.output_dir == 'log'
    assert not args.plot


def test_main_writes_outputs(tmp_path, capsys):
    code = optimize.main(['--generations', '1', '--population', '2', '--seed', '1',
                          '--output-dir', str(tmp_path), '--plot'])
    assert code == 0
    assert len(list((tmp_path / 'best_parameters').glob('*.json'))) == 1
    assert len(list((tmp_path / 'history').glob('*.csv'))) == 1
    assert len(list((tmp_path / 'plots').glob('*.png'))) == 1
    assert "OPTIMIZATION RESULT" in capsys.readouterr().out


def test_main_no_save(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert optimize.main(['--generations', '1', '--population', '2', '--no-save']) == 0
    assert list(tmp_path.iterdir()) == []


def test_main_compare(mocker, capsys):
    compare = mocker.patch.object(optimize, 'compare_presets', return_value=[])
    assert optimize.main(['--compare', '--population', '4', '--seed', '3']) == 0
    compare.assert_called_once_with(population_size=4, seed=3)
    assert "PRESET COMPARISON" in capsys.readouterr().out
