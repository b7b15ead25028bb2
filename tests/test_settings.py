from contextor.settings import AutoCopySetting


def test_defaults_to_disabled():
    setting = AutoCopySetting()
    assert setting.enabled is False
    assert not setting


def test_toggle():
    setting = AutoCopySetting()
    assert setting.toggle() is True
    assert setting.enabled is True
    assert setting.toggle() is False


def test_assignment_coerces_to_bool():
    setting = AutoCopySetting()
    setting.enabled = 1
    assert setting.enabled is True
