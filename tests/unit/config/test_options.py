from design_patterns.config import Options, ServiceSettings


def test_options_expose_wrapped_settings():
    settings = ServiceSettings()

    options = Options.create(settings)

    assert options.value is settings
    assert options.value.api_key == "12345"


def test_options_from_container(container):
    assert container.get(Options).value.api_key == "12345"
