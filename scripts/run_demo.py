import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))
from liblog import LogLevel, get_current_logger, get_logger, set_logger_provider
from liblog.adapters.console import ConsoleLogProvider, ConsoleWriter

def main() -> None:
    # Auto-detected provider: loguru when installed, otherwise a no-op
    log = get_logger("demo")
    emitted = log.log(LogLevel.INFO, lambda: "auto-detected backend says hello to {0}", None, ["world"])
    print(f"[demo] auto-detected provider emitted={emitted}")

    writer = ConsoleWriter()
    set_logger_provider(ConsoleLogProvider(writer))
    log = get_current_logger()
    log.log(LogLevel.INFO, lambda: "console backend ready")
    log.log(LogLevel.WARN, lambda: "disk {0} is {1}% full", None, ["/var", 91])
    try:
        1 / 0
    except ZeroDivisionError as e:
        log.log(LogLevel.ERROR, lambda: "division failed", e)
    writer.close()

if __name__ == "__main__":
    main()
