"""Tests for the PageLibrary keyword library."""

from unittest.mock import MagicMock, patch

import pytest

from robotpages.domains.page_model import (
    Control,
    ElementLookupError,
    InMemoryApplicationRegistry,
    NotConfiguredError,
    Page,
    PresenceError,
    Region,
    RegionError,
    ValidationError,
)
from robotpages.lib import PageLibrary


@pytest.fixture
def builtin():
    """Patch BuiltIn used by presence verifiers."""
    with patch("robotpages.adapters.presence_adapter.BuiltIn") as builtin_cls:
        instance = MagicMock()
        instance.run_keyword_and_return_status.return_value = True
        builtin_cls.return_value = instance
        yield instance


@pytest.fixture
def registry():
    return InMemoryApplicationRegistry()


@pytest.fixture
def library_cls(registry):
    """PageLibrary bound to an isolated application registry."""

    class IsolatedPageLibrary(PageLibrary):
        application_registry = registry

    return IsolatedPageLibrary


@pytest.fixture
def lib(library_cls):
    library = library_cls(default_application="Blogger")
    library._builtin = MagicMock()
    return library


@pytest.fixture
def login(lib, builtin):
    page = lib.define_page("Login", aliases="Sign In,Log On", presence_keyword="Login Form Is Open")
    lib.define_control("Login", "Username", aliases=["User"], locator="id=username")
    lib.define_region("Sign In", "Recent Users", locator="css=li:has-text('{value}')")
    return page


class TestDefinitionKeywords:
    """Tests for Define Page / Define Region / Define Control."""

    def test_define_page_registers_in_default_application(self, lib, registry, login):
        assert isinstance(login, Page)
        assert login.aliases == ("Sign In", "Log On")
        assert registry.find("Blogger").page("Log On") is login

    def test_define_page_in_named_application(self, lib, registry):
        page = lib.define_page("Checkout", application="Shop")
        assert registry.find("Shop").page("Checkout") is page
        assert lib.get_page("Checkout", application="Shop") is page

    def test_define_page_without_presence(self, lib):
        page = lib.define_page("About")
        assert page.presence is None

    def test_define_page_with_json_aliases(self, lib):
        page = lib.define_page("Home", aliases='["Start", "Main"]')
        assert page.aliases == ("Start", "Main")

    def test_define_page_rejects_two_directives(self, lib):
        with pytest.raises(ValueError, match="Only one"):
            lib.define_page("Home", presence_locator="id=home", presence_title="Home")

    def test_define_page_with_presence_keyword_args(self, lib, builtin):
        page = lib.define_page(
            "Inbox", presence_keyword="Folder Is Open", presence_args="Inbox,10s"
        )

        assert page.presence()
        builtin.run_keyword_and_return_status.assert_called_once_with(
            "Folder Is Open", "Inbox", "10s"
        )

    def test_presence_args_without_keyword_rejected(self, lib):
        with pytest.raises(ValueError, match="require a presence keyword"):
            lib.define_page("Inbox", presence_locator="id=inbox", presence_args=["x"])

    def test_registry_is_not_an_import_argument(self, registry):
        with pytest.raises(TypeError):
            PageLibrary(registry=registry)

    def test_binds_to_process_wide_registry_by_default(self, clean_default_registry):
        page = PageLibrary(default_application="Blogger").define_page("About")
        assert clean_default_registry.find("Blogger").page("About") is page

    def test_define_page_inherits_collision_setting(self, library_cls):
        quiet = library_cls(warn_on_key_collision="false")
        assert quiet.define_page("Home").warn_on_key_collision is False

    def test_import_arguments_override_config_file(self, library_cls, tmp_path):
        config_file = tmp_path / "pages.yaml"
        config_file.write_text("default_application: Pharmacy\nweb_library: SeleniumLibrary\n")

        library = library_cls(default_application="Clinic", config=str(config_file))

        assert library.config.default_application == "Clinic"
        assert library.config.web_library == "SeleniumLibrary"

    def test_define_elements(self, lib, login):
        assert isinstance(login.controls["User"], Control)
        assert isinstance(login.regions["Recent Users"], Region)

    def test_define_element_on_unknown_page(self, lib, login):
        with pytest.raises(ElementLookupError, match='page name requested: "Nowhere"'):
            lib.define_control("Nowhere", "Save")

    def test_unknown_application(self, lib):
        with pytest.raises(ElementLookupError, match='application name requested: "Shop"'):
            lib.get_page("Login", application="Shop")

    def test_invalid_page_name(self, lib):
        with pytest.raises(ValidationError):
            lib.define_page("")


class TestUsageKeywords:
    """Tests for locator, navigation and page test keywords."""

    def test_get_control_locator(self, lib, login, builtin):
        assert lib.get_control_locator("Sign In", "User") == "id=username"
        builtin.run_keyword_and_return_status.assert_called_once_with("Login Form Is Open")

    def test_get_region_locator_scoped(self, lib, login):
        assert lib.get_region_locator("Login", "Recent Users", value="jdoe") == (
            "css=li:has-text('jdoe')"
        )

    def test_templated_region_requires_value(self, lib, login):
        with pytest.raises(RegionError, match="requires a filter value"):
            lib.get_region_locator("Login", "Recent Users")

    def test_presence_failure_fails_keyword(self, lib, login, builtin):
        builtin.run_keyword_and_return_status.return_value = False

        with pytest.raises(PresenceError, match='region "Recent Users"'):
            lib.get_region_locator("Login", "Recent Users", value="jdoe")

    def test_verify_page_is_present(self, lib, login, builtin):
        lib.verify_page_is_present("Login")

        builtin.run_keyword_and_return_status.return_value = False
        with pytest.raises(PresenceError, match='Page "Log On" is not present'):
            lib.verify_page_is_present("Log On")

    def test_navigation_runs_keyword_with_options(self, lib, login):
        lib.set_page_navigation("Login", "Go To", "https://example.com/login")

        lib.navigate_to_page("Sign In", lang="en")

        lib._builtin.run_keyword.assert_called_once_with(
            "Go To", "https://example.com/login", "lang=en"
        )

    def test_navigation_not_configured(self, lib, login):
        with pytest.raises(NotConfiguredError):
            lib.navigate_to_page("Login")

    def test_page_test_runs_keyword(self, lib, login):
        lib._builtin.run_keyword.return_value = "checked"
        lib.set_page_test("Login", "Page Should Contain", "Welcome")

        assert lib.run_page_test("Login") == "checked"
        lib._builtin.run_keyword.assert_called_once_with("Page Should Contain", "Welcome")

    def test_page_test_not_configured(self, lib, login):
        with pytest.raises(NotConfiguredError):
            lib.run_page_test("Login")
