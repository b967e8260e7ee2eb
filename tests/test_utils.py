"""Tests for lmcmode.utils."""


class TestGetLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from lmcmode.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "lmcmode.mymodule"

    def test_logger_with_package_prefix(self) -> None:
        from lmcmode.utils.logger import get_logger

        logger = get_logger("lmcmode.registry")
        assert logger.name == "lmcmode.registry"

    def test_logger_name_starting_with_package_not_submodule(self) -> None:
        """Names starting with 'lmcmode' but not submodules should get prefix."""
        from lmcmode.utils.logger import get_logger

        logger = get_logger("lmcmode_other")
        assert logger.name == "lmcmode.lmcmode_other"

    def test_logger_exact_package_name(self) -> None:
        from lmcmode.utils import get_logger

        assert get_logger("lmcmode").name == "lmcmode"

    def test_modules_share_package_namespace(self) -> None:
        import logging

        from lmcmode import plugin, registry, workspace
        from lmcmode.utils.logger import PACKAGE

        root = logging.getLogger(PACKAGE)
        for module in (plugin, registry, workspace):
            assert module.logger.parent is root
