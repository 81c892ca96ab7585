from soloader.settings import Settings


def test_missing_file_gives_defaults(tmp_path):
    settings = Settings.load(tmp_path / "config.txt")
    assert settings == Settings()
    assert settings.sample_setting == 1
    assert settings.sample_setting2 is True


def test_save_format(tmp_path):
    path = tmp_path / "config.txt"
    Settings().save(path)
    assert path.read_text() == "setting_sampleSetting 1\nsetting_sampleSetting2 1\n"


def test_round_trip(tmp_path):
    path = tmp_path / "config.txt"
    original = Settings(sample_setting=42, sample_setting2=False)
    original.save(path)
    assert Settings.load(path) == original


def test_load_ignores_unknown_and_bad_lines(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("other 5\nsetting_sampleSetting abc\nsetting_sampleSetting2 0\n")
    settings = Settings.load(path)
    assert settings.sample_setting == 1
    assert settings.sample_setting2 is False


def test_nonzero_is_true(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("setting_sampleSetting2 7\nsetting_sampleSetting -3\n")
    settings = Settings.load(path)
    assert settings.sample_setting2 is True
    assert settings.sample_setting == -3


def test_reset():
    settings = Settings(sample_setting=9, sample_setting2=False)
    settings.reset()
    assert settings == Settings()