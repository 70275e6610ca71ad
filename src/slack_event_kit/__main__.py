import asyncio
import logging
import signal
from pathlib import Path

from slack_event_kit.config import load_config
from slack_event_kit.event import EmptyPayloadError, EventDecodeError
from slack_event_kit.eventsapi import DefaultEventReceiver, EventWrapper
from slack_event_kit.gateway import SlackGateway
from slack_event_kit.rtmapi import Connection, ConnectionClosedError, UnexpectedMessageTypeError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def log_event(wrapper: EventWrapper) -> None:
    """Events APIで受信したイベントをログに出力する"""
    logger.info("Received event: event_id=%s, type=%s", wrapper.callback.event_id, wrapper.event.event_type())


async def listen(connection: Connection) -> None:
    """接続が閉じられるまでRTM APIのフレームを受信し続ける"""
    try:
        while True:
            try:
                payload = await connection.receive()
            except EmptyPayloadError:
                continue
            except (EventDecodeError, UnexpectedMessageTypeError) as e:
                logger.warning("Failed to decode received frame: %s", e)
                continue

            logger.info("Received payload: %r", payload)
    except ConnectionClosedError as e:
        logger.info("RTM connection closed: %s", e)
    finally:
        await connection.close()


async def main() -> None:
    """アプリケーションのエントリーポイント"""
    # 統合設定を読み込み
    config = load_config(Path("config.yaml"))
    logger.info("Config loaded: mode=%s, listen_port=%d", config.mode, config.listen_port)

    gateway = SlackGateway(config)

    if config.mode == "rtm":
        connection = await gateway.connect_rtm()
        await listen(connection)
        return

    await gateway.run_server(DefaultEventReceiver(log_event))


def setup_signal_handlers(loop: asyncio.AbstractEventLoop, task: asyncio.Task) -> None:
    """シグナルハンドラを設定"""

    def handle_signal(sig: int) -> None:
        logger.info("Received signal %d, shutting down...", sig)
        task.cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda s=sig: handle_signal(s))


def cli() -> None:
    """コマンドラインから起動する"""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    main_task = loop.create_task(main())
    setup_signal_handlers(loop, main_task)

    try:
        loop.run_until_complete(main_task)
    except asyncio.CancelledError:
        logger.info("Application stopped")
    finally:
        loop.close()


if __name__ == "__main__":
    cli()
