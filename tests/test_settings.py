from sortvis.settings import BarsType, PlotType, Sampling, Settings


def test_defaults_from_source():
    settings = Settings()
    assert settings.shuffle_current_count == 128
    assert settings.plot_type is PlotType.BARS
    assert settings.plot_bars_type is BarsType.BARS
    assert settings.numbers_downsample is Sampling.NONE
    assert settings.audio_wave_type == 0


def test_limits():
    settings = Settings()
    assert settings.SHUFFLE_MAX_VALUE == 65535
    assert (
        settings.SHUFFLE_MIN_COUNT
        <= settings.shuffle_current_count
        <= settings.SHUFFLE_MAX_COUNT
    )
    assert settings.PLOT_MIN_DELAY < settings.PLOT_MAX_DELAY


def test_sampling_factors_are_powers_of_two():
    members = [Sampling(s.value) for s in Sampling]
    assert members == list(Sampling)
    factors = [s.factor for s in members]
    assert factors[0] == 1
    assert Sampling(Sampling.X16.value).factor == 16
    assert all(b == 2 * a for a, b in zip(factors, factors[1:]))


def test_instances_are_independent():
    first = Settings()
    second = Settings()
    first.shuffle_current_count = 1024
    assert second.shuffle_current_count == 128


def test_cursor_width_at_max_count():
    settings = Settings(shuffle_current_count=Settings.SHUFFLE_MAX_COUNT)
    settings.update_cursor_line_width()
    assert settings.cursor_line_width == Settings.CURSOR_LINE_MAX_WIDTH


def test_cursor_width_clamps_above_max():
    settings = Settings()
    settings.update_cursor_line_width_dynamically(Settings.SHUFFLE_MAX_COUNT * 4)
    assert settings.cursor_line_width == Settings.CURSOR_LINE_MAX_WIDTH


def test_cursor_width_at_zero():
    settings = Settings()
    settings.update_cursor_line_width_dynamically(0)
    assert settings.cursor_line_width == Settings.CURSOR_LINE_MIN_WIDTH


def test_cursor_width_grows_with_count():
    settings = Settings()
    widths = []
    for count in (32, 128, 1024, 8192):
        settings.update_cursor_line_width_dynamically(count)
        widths.append(settings.cursor_line_width)
    assert widths == sorted(widths)
    assert all(
        Settings.CURSOR_LINE_MIN_WIDTH <= w <= Settings.CURSOR_LINE_MAX_WIDTH
        for w in widths
    )


def test_update_uses_current_count():
    settings = Settings(shuffle_current_count=2048)
    settings.update_cursor_line_width()
    expected = Settings()
    expected.update_cursor_line_width_dynamically(2048)
    assert settings.cursor_line_width == expected.cursor_line_width