from tests.test_utils.fakes.detection import ScriptedFetcher

__all__ = ["ScriptedFetcher"]
