"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from vouch work."""

    def test_assertions(self) -> None:
        from vouch import assert_does_not_raise, check_does_not_raise

        assert assert_does_not_raise(lambda: 1) == 1
        assert check_does_not_raise(lambda: 1).is_success()

    def test_types(self) -> None:
        from vouch import AssertionFailedError, AssertionFailure, Failed, Success

        assert Success(1).unwrap() == 1
        assert Failed(AssertionFailedError('x')).is_failed()
        assert AssertionFailure('x').to_exception().message == 'x'

    def test_decorators(self) -> None:
        from vouch import does_not_raise

        assert callable(does_not_raise)

    def test_config(self) -> None:
        from vouch import VouchConfig, get_config, init

        assert callable(init)
        assert isinstance(get_config(), VouchConfig)


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_assertions(self) -> None:
        from vouch.assertions import assert_does_not_raise

        assert callable(assert_does_not_raise)

    def test_decorators(self) -> None:
        from vouch.decorators import does_not_raise

        assert callable(does_not_raise)

    def test_function_protocols(self) -> None:
        from vouch.function import Action, MessageSupplier, ValueProducer

        assert Action is not None
        assert ValueProducer is not None
        assert MessageSupplier is not None
