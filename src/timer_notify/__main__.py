"""Enable running timer-notify as a module: python -m timer_notify."""

from timer_notify.cli import main

if __name__ == "__main__":
    main()
