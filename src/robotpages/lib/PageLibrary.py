"""PageLibrary - page-object keywords for Robot Framework.

Lets suites describe the pages of an application under test (regions,
controls, presence directives, navigation and page tests) and resolve
their elements by name or alias. Every region and control lookup first
confirms that the owning page is displayed.
"""

import logging
from typing import Any, Dict, Optional

from robot.api import logger as rf_logger
from robot.api.deco import keyword, library
from robot.libraries.BuiltIn import BuiltIn

from robotpages.adapters.presence_adapter import create_presence_verifier
from robotpages.domains.page_model import (
    Application,
    ApplicationRegistry,
    Control,
    ElementLookupError,
    Page,
    Region,
    default_registry,
)
from robotpages.lib.arguments import coerce_aliases, coerce_keyword_args
from robotpages.models.config_models import PageLibraryConfig

logger = logging.getLogger(__name__)


@library(scope="GLOBAL", version="1.0.0", doc_format="ROBOT")
class PageLibrary:
    """Page-object keywords for Robot Framework.

    = Configuration =

    | *** Settings ***
    | Library    robotpages.lib.PageLibrary
    | ...    default_application=Blogger
    | ...    web_library=SeleniumLibrary
    | ...    presence_timeout=10s

    Or using a config file:
    | Library    robotpages.lib.PageLibrary    config=${CURDIR}/pages.yaml

    = Examples =

    | *** Test Cases ***
    | Edit User
    |     Define Page       Edit User    aliases=User Edit,Edit Account    presence_locator=id=user-form
    |     Define Control    Edit User    Save    aliases=Submit    locator=id=save
    |     Define Region     Edit User    User List    locator=css=tr:has-text('{value}')
    |     ${row}=    Get Region Locator    Edit User    User List    value=jdoe
    |     ${save}=   Get Control Locator   User Edit    Submit
    """

    ROBOT_LIBRARY_SCOPE = "GLOBAL"
    ROBOT_LIBRARY_VERSION = "1.0.0"

    # Registry the library binds to; None means the process-wide default
    application_registry: Optional[ApplicationRegistry] = None

    def __init__(
        self,
        default_application: str = None,
        web_library: str = None,
        presence_timeout: str = None,
        log_level: str = None,
        warn_on_key_collision: bool = None,
        config: str = None,
    ):
        """Initialize PageLibrary.

        Args:
            default_application: Application used when a keyword gets none
            web_library: Browser or SeleniumLibrary, used by presence directives
            presence_timeout: Wait time of locator presence checks (RF time format)
            log_level: Logging verbosity of the robotpages package
            warn_on_key_collision: Log a warning when a name/alias is re-used
            config: Path to YAML config file (import arguments override it)
        """
        overrides = {
            "default_application": default_application,
            "web_library": web_library,
            "presence_timeout": presence_timeout,
            "log_level": log_level,
            "warn_on_key_collision": warn_on_key_collision,
        }
        if config:
            self.config = PageLibraryConfig.from_yaml(config)
            self.config.update(**overrides)
        else:
            self.config = PageLibraryConfig.from_kwargs(**overrides)

        self._registry = (
            self.application_registry
            if self.application_registry is not None
            else default_registry()
        )
        self._builtin: Optional[BuiltIn] = None

        logging.getLogger("robotpages").setLevel(
            getattr(logging, self.config.log_level, logging.INFO)
        )

    @property
    def builtin(self) -> BuiltIn:
        """Get BuiltIn library instance (lazy initialization)."""
        if self._builtin is None:
            self._builtin = BuiltIn()
        return self._builtin

    # ==========================================================================
    # Definition Keywords
    # ==========================================================================

    @keyword("Define Page")
    def define_page(
        self,
        name: str,
        aliases: Any = None,
        application: str = None,
        presence_locator: str = None,
        presence_keyword: str = None,
        presence_title: str = None,
        presence_args: Any = None,
    ) -> Page:
        """Define a page and add it to an application.

        At most one presence directive may be given. Without one, the page
        is assumed to be displayed whenever its elements are requested.

        | =Arguments= | =Description= |
        | name | Canonical page name |
        | aliases | Alternate names (list or comma-separated) |
        | application | Application name (default: library setting) |
        | presence_locator | Element that is visible when the page is displayed |
        | presence_keyword | Keyword that passes when the page is displayed |
        | presence_title | Expected browser title of the page |
        | presence_args | Arguments of presence_keyword (list or comma-separated) |

        = Examples =
        | Define Page | Login | aliases=Sign In | presence_locator=id=login-form |
        | Define Page | Home | presence_title=Dashboard |
        | Define Page | Inbox | presence_keyword=Folder Is Open | presence_args=Inbox,10s |
        """
        page = Page(name=name, aliases=coerce_aliases(aliases))
        page.warn_on_key_collision = self.config.warn_on_key_collision
        page.set_presence(
            create_presence_verifier(
                locator=presence_locator,
                keyword=presence_keyword,
                title=presence_title,
                library=self.config.web_library,
                timeout=self.config.presence_timeout,
                keyword_args=coerce_keyword_args(presence_args),
            )
        )
        app_name = application or self.config.default_application
        page.add_to_application(app_name, registry=self._registry)
        rf_logger.info(f"Defined page '{name}' in application '{app_name}'")
        return page

    @keyword("Define Region")
    def define_region(
        self,
        page: str,
        name: str,
        aliases: Any = None,
        locator: str = None,
        application: str = None,
    ) -> Region:
        """Define a region of a page.

        The locator may contain a ``{value}`` placeholder that is replaced
        with the filter value given to `Get Region Locator`.

        = Examples =
        | Define Region | Edit User | User List | locator=css=tr:has-text('{value}') |
        """
        region = Region(name=name, aliases=coerce_aliases(aliases), locator=locator)
        self._page(page, application).add_region(region)
        rf_logger.debug(f"Defined region '{name}' on page '{page}'")
        return region

    @keyword("Define Control")
    def define_control(
        self,
        page: str,
        name: str,
        aliases: Any = None,
        locator: str = None,
        application: str = None,
    ) -> Control:
        """Define a control of a page.

        = Examples =
        | Define Control | Login | Username | aliases=User | locator=id=username |
        """
        control = Control(name=name, aliases=coerce_aliases(aliases), locator=locator)
        self._page(page, application).add_control(control)
        rf_logger.debug(f"Defined control '{name}' on page '{page}'")
        return control

    @keyword("Set Page Navigation")
    def set_page_navigation(
        self, page: str, keyword_name: str, *args: Any, application: str = None
    ) -> None:
        """Set the keyword that navigates to a page.

        Options given to `Navigate To Page` are appended to ``args`` as
        ``name=value`` arguments.

        = Examples =
        | Set Page Navigation | Login | Go To | https://example.com/login |
        """
        target = self._page(page, application)

        def navigation(options: Dict[str, Any]) -> Any:
            named = [f"{key}={value}" for key, value in options.items()]
            return self.builtin.run_keyword(keyword_name, *args, *named)

        target.add_navigation(navigation)

    @keyword("Set Page Test")
    def set_page_test(
        self, page: str, keyword_name: str, *args: Any, application: str = None
    ) -> None:
        """Set the keyword run by `Run Page Test`.

        = Examples =
        | Set Page Test | Login | Page Should Contain | Welcome back |
        """
        target = self._page(page, application)
        target.add_page_test(lambda: self.builtin.run_keyword(keyword_name, *args))

    # ==========================================================================
    # Usage Keywords
    # ==========================================================================

    @keyword("Get Page")
    def get_page(self, page: str, application: str = None) -> Page:
        """Return the page object registered under a name or alias."""
        return self._page(page, application)

    @keyword("Get Region Locator")
    def get_region_locator(
        self, page: str, region: str, value: Any = None, application: str = None
    ) -> Optional[str]:
        """Confirm the page is displayed and return the region locator scoped by ``value``.

        Fails if the page presence check fails or the region is unknown.

        = Examples =
        | ${row}= | Get Region Locator | Edit User | User List | value=jdoe |
        """
        resolved = self._page(page, application).region({region: value})
        return resolved.scoped_locator

    @keyword("Get Control Locator")
    def get_control_locator(
        self, page: str, control: str, application: str = None
    ) -> Optional[str]:
        """Confirm the page is displayed and return the control locator.

        = Examples =
        | ${save}= | Get Control Locator | Edit User | Save |
        | Click | ${save} |
        """
        return self._page(page, application).control(control).locator

    @keyword("Navigate To Page")
    def navigate_to_page(self, page: str, application: str = None, **options: Any) -> Any:
        """Run the navigation defined with `Set Page Navigation`.

        = Examples =
        | Navigate To Page | Login |
        | Navigate To Page | Edit User | user=jdoe |
        """
        rf_logger.info(f"Navigating to page '{page}'")
        return self._page(page, application).navigate(options)

    @keyword("Run Page Test")
    def run_page_test(self, page: str, application: str = None) -> Any:
        """Run the page test defined with `Set Page Test`."""
        return self._page(page, application).page_test()

    @keyword("Verify Page Is Present")
    def verify_page_is_present(self, page: str, application: str = None) -> None:
        """Fail unless the presence directive of the page passes."""
        target = self._page(page, application)
        target.verify_presence(f'Page "{page}" is not present')

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _application(self, application: Optional[str]) -> Application:
        app_name = application or self.config.default_application
        app = self._registry.find(app_name)
        if app is None:
            raise ElementLookupError("application", app_name)
        return app

    def _page(self, page: str, application: Optional[str]) -> Page:
        return self._application(application).page(page)
