import logging

from demo.showcase import Showcase
from drawkit.settings import load_settings
from drawkit.window import GraphWin


def main():
    cfg = load_settings()
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    win = GraphWin(cfg)
    win.open()
    show = Showcase(win)
    win.run(show.on_frame)

if __name__ == "__main__":
    main()
