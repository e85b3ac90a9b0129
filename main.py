from er.history import History
from er.log import configure_logging
from er.session import Session
from er.shell import main_loop


def main():
    configure_logging()
    session = Session()
    history = History()
    history.load()

    try:
        main_loop(session, history)
    finally:
        history.save()


if __name__ == "__main__":
    main()
