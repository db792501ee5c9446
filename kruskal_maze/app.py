import tkinter as tk

from .config import (
    BG_COLOR, CELL_COLOR, FINAL_PATH_COLOR, GOAL_COLOR, PLAYER_COLOR, PLAYER_TRAIL_COLOR,
    SEARCH_AREA_COLOR, START_COLOR, WALL_COLOR, MazeConfig,
)
from .session import MazeSession


class MazeApp:
    """
    Tkinter front end for a MazeSession.

    Keys: arrows move the player, "b" starts a breadth-first search, "d" a
    depth-first search, "n" builds a new maze. The search advances one step
    per tick of the root.after() loop; reaching the goal by hand shows the win
    banner.
    """
    def __init__(self, root, config=None):
        self.root = root
        self.config = config if config is not None else MazeConfig()
        self.session = MazeSession(self.config)
        self.root.title("Kruskal Maze")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        side = self.config.cell_size * self.config.grid_size
        self.canvas = tk.Canvas(self.root, width=side, height=side, bg=BG_COLOR, highlightthickness=0)
        self.canvas.pack(padx=10, pady=10)
        self.status_var = tk.StringVar(value="")
        tk.Label(self.root, textvariable=self.status_var, bg=BG_COLOR, fg="white").pack(pady=(0, 10))

        self.root.bind("<KeyPress>", self.on_key)
        self.draw()
        self.root.after(self.config.tick_delay_ms, self.update_loop)

    def on_key(self, event):
        if self.session.handle_key(event.keysym):
            self.draw()

    def update_loop(self):
        if self.session.tick():
            self.draw()
        self.root.after(self.config.tick_delay_ms, self.update_loop)

    def draw(self):
        snap = self.session.snapshot()
        cs = self.config.cell_size
        canvas = self.canvas
        canvas.delete("all")

        searched = set(snap.trace)
        on_path = set(snap.solution_path)
        trail = set(snap.player_trail)

        # Pass 1: cell backgrounds
        for y in range(snap.size):
            for x in range(snap.size):
                cell = (x, y)
                if cell == snap.goal:
                    fill = GOAL_COLOR
                elif cell == snap.start:
                    fill = START_COLOR
                elif cell in on_path:
                    fill = FINAL_PATH_COLOR
                elif cell in searched:
                    fill = SEARCH_AREA_COLOR
                elif cell in trail:
                    fill = PLAYER_TRAIL_COLOR
                else:
                    fill = CELL_COLOR
                canvas.create_rectangle(x * cs, y * cs, (x + 1) * cs, (y + 1) * cs, fill=fill, outline="")

        # Pass 2: walls on top
        layout = snap.layout
        for y in range(snap.size):
            for x in range(snap.size):
                x1, y1, x2, y2 = x * cs, y * cs, (x + 1) * cs, (y + 1) * cs
                if layout.has_top_wall((x, y)): canvas.create_line(x1, y1, x2, y1, fill=WALL_COLOR, width=2)
                if layout.has_bottom_wall((x, y)): canvas.create_line(x1, y2, x2, y2, fill=WALL_COLOR, width=2)
                if layout.has_left_wall((x, y)): canvas.create_line(x1, y1, x1, y2, fill=WALL_COLOR, width=2)
                if layout.has_right_wall((x, y)): canvas.create_line(x2, y1, x2, y2, fill=WALL_COLOR, width=2)

        px, py = snap.player
        m = max(1, cs // 5)
        canvas.create_rectangle(px * cs + m, py * cs + m, (px + 1) * cs - m, (py + 1) * cs - m,
                                fill=PLAYER_COLOR, outline="")

        if snap.won:
            self.draw_winner_message("Win!")
        self.status_var.set(self._status_text(snap))

    def _status_text(self, snap):
        if snap.search_kind is None:
            return "Arrows: move   b: breadth-first   d: depth-first   n: new maze"
        text = f"{snap.search_kind.value}: {snap.search_status.value}, {len(snap.visited)} visited"
        if snap.solution_path:
            text += f", path length {len(snap.solution_path) - 1}"
        return text

    def draw_winner_message(self, message):
        w = int(self.canvas["width"]); h = int(self.canvas["height"])
        self.canvas.create_rectangle(w / 2 - 60, h / 2 - 20, w / 2 + 60, h / 2 + 20,
                                     fill=BG_COLOR, outline="white", width=2)
        self.canvas.create_text(w / 2, h / 2, text=message, fill="white", font=("Helvetica", 16, "bold"))


def run_app(config=None):
    root = tk.Tk()
    MazeApp(root, config)
    root.mainloop()


if __name__ == "__main__":
    run_app()
