import sys
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import parash.core.interfaces as I

    assert hasattr(I, "ChildHandleProtocol")
    assert hasattr(I, "ProcessLauncherProtocol")
    assert hasattr(I, "HTTPStreamTransportProtocol")
    assert hasattr(I, "ScriptFetcherProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")


def test_default_implementations_satisfy_protocols():
    import parash.core.interfaces as I
    from parash.io.script_fetcher import ScriptFetcher
    from parash.net.socket_transport import SocketHTTPTransport
    from parash.runtime.launcher import SubprocessLauncher

    assert isinstance(SubprocessLauncher(), I.ProcessLauncherProtocol)
    assert isinstance(SocketHTTPTransport(), I.HTTPStreamTransportProtocol)
    assert isinstance(ScriptFetcher(), I.ScriptFetcherProtocol)


def test_public_package_surface():
    import parash

    assert parash.__version__
    for name in parash.__all__:
        assert hasattr(parash, name), name
