# File: smartlot/presentation/parking_gui.py
"""
Tkinter GUI for the Smart Parking Lot

Tabs:
1. Car Entry/Exit - admit and release cars by license plate
2. Parking Status - every spot and the car in it
3. Statistics     - counts, average stay and today's revenue
4. History        - completed sessions
5. Clone Car      - show a parked car next to its duplicate

ParkingLotController (controller.py) holds everything that does not
touch a widget. ParkingLotApp subscribes to the lot and re-renders
every tab on each change.
"""

import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional, Tuple
import logging

from .controller import ParkingLotController


class AppConfig:
    """GUI configuration"""
    APP_NAME = "Smart Parking Lot Management System"
    VERSION = "1.0.0"

    DEFAULT_WIDTH = 900
    DEFAULT_HEIGHT = 600
    MIN_WIDTH = 700
    MIN_HEIGHT = 450

    COLORS = {
        "bg": "#ecf0f1",
        "text_bg": "#fafafa",
        "fg": "#2c3e50",
    }

    FONTS = {
        "entry": ("SansSerif", 14),
        "button": ("SansSerif", 11, "bold"),
        "monospace": ("Courier", 12),
        "table": ("SansSerif", 11),
    }

    HISTORY_COLUMNS = ("License Plate", "Entry Time", "Exit Time", "Duration (min)", "Paid")


# ============================================================================
# MAIN WINDOW
# ============================================================================

class ParkingLotApp:
    """Main application window"""

    def __init__(self, controller: ParkingLotController, root: Optional[tk.Tk] = None):
        self.controller = controller
        self.logger = logging.getLogger(self.__class__.__name__)

        self.root = root or tk.Tk()
        self.root.title(f"{AppConfig.APP_NAME} v{AppConfig.VERSION}")
        self.root.geometry(f"{AppConfig.DEFAULT_WIDTH}x{AppConfig.DEFAULT_HEIGHT}")
        self.root.minsize(AppConfig.MIN_WIDTH, AppConfig.MIN_HEIGHT)
        self.root.configure(bg=AppConfig.COLORS["bg"])

        self._configure_styles()

        notebook = ttk.Notebook(self.root)
        notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        notebook.add(self._make_entry_exit_tab(notebook), text="Car Entry/Exit")
        notebook.add(self._make_status_tab(notebook), text="Parking Status")
        notebook.add(self._make_stats_tab(notebook), text="Statistics")
        notebook.add(self._make_history_tab(notebook), text="History")
        notebook.add(self._make_clone_tab(notebook), text="Clone Car")

        # Live updates on lot changes
        self.controller.subscribe(lambda lot: self.refresh_all())
        self.refresh_all()

    def _configure_styles(self) -> None:
        style = ttk.Style(self.root)
        style.configure("TFrame", background=AppConfig.COLORS["bg"])
        style.configure("TLabelframe", background=AppConfig.COLORS["bg"])
        style.configure("TButton", font=AppConfig.FONTS["button"], padding=(12, 6))
        style.configure("Treeview", font=AppConfig.FONTS["table"], rowheight=22)

    # ========================================================================
    # TABS
    # ========================================================================

    def _make_entry_exit_tab(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent, padding=25)

        entry_frame = ttk.LabelFrame(frame, text="Car Entry", padding=10)
        entry_frame.pack(fill=tk.X, pady=(0, 15))
        self.plate_add_var = tk.StringVar()
        self._plate_row(entry_frame, self.plate_add_var, "Add Car", self.on_add_car)

        exit_frame = ttk.LabelFrame(frame, text="Car Exit", padding=10)
        exit_frame.pack(fill=tk.X)
        self.plate_remove_var = tk.StringVar()
        self._plate_row(exit_frame, self.plate_remove_var, "Remove Car", self.on_remove_car)

        return frame

    def _make_status_tab(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent, padding=25)
        self.status_text = self._text_area(frame, "Current Parking Lot Status", height=18)
        ttk.Button(frame, text="Refresh", command=self.update_status).pack(pady=(10, 0))
        return frame

    def _make_stats_tab(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent, padding=25)
        self.stats_text = self._text_area(frame, "Lot Statistics", height=12)
        ttk.Button(frame, text="Refresh Stats", command=self.update_stats).pack(pady=(10, 0))
        return frame

    def _make_history_tab(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent, padding=25)
        box = ttk.LabelFrame(frame, text="Parking Lot History", padding=5)
        box.pack(fill=tk.BOTH, expand=True)

        self.history_tree = ttk.Treeview(box, columns=AppConfig.HISTORY_COLUMNS, show="headings")
        for column in AppConfig.HISTORY_COLUMNS:
            self.history_tree.heading(column, text=column)
            self.history_tree.column(column, width=150, anchor=tk.CENTER)

        scrollbar = ttk.Scrollbar(box, orient=tk.VERTICAL, command=self.history_tree.yview)
        self.history_tree.configure(yscrollcommand=scrollbar.set)
        self.history_tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

        ttk.Button(frame, text="Refresh History", command=self.update_history).pack(pady=(10, 0))
        return frame

    def _make_clone_tab(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent, padding=25)

        top = ttk.LabelFrame(frame, text="Clone Car Data", padding=10)
        top.pack(fill=tk.X, pady=(0, 10))
        self.plate_clone_var = tk.StringVar()
        self._plate_row(top, self.plate_clone_var, "Clone Car", self.on_clone_car)

        self.clone_text = self._text_area(frame, "Clone Result", height=8)
        return frame

    # ========================================================================
    # WIDGET HELPERS
    # ========================================================================

    def _plate_row(self, parent, variable: tk.StringVar, button_text: str, command) -> None:
        ttk.Label(parent, text="License Plate:").pack(side=tk.LEFT, padx=(0, 8))
        entry = ttk.Entry(parent, textvariable=variable, width=16, font=AppConfig.FONTS["entry"])
        entry.pack(side=tk.LEFT, padx=(0, 8))
        entry.bind("<Return>", lambda event: command())
        ttk.Button(parent, text=button_text, command=command).pack(side=tk.LEFT)

    def _text_area(self, parent, title: str, height: int) -> tk.Text:
        box = ttk.LabelFrame(parent, text=title, padding=5)
        box.pack(fill=tk.BOTH, expand=True)
        text = tk.Text(
            box,
            height=height,
            font=AppConfig.FONTS["monospace"],
            bg=AppConfig.COLORS["text_bg"],
            fg=AppConfig.COLORS["fg"],
            wrap=tk.WORD,
            state=tk.DISABLED
        )
        text.pack(fill=tk.BOTH, expand=True)
        return text

    @staticmethod
    def _set_text(widget: tk.Text, content: str) -> None:
        widget.config(state=tk.NORMAL)
        widget.delete("1.0", tk.END)
        widget.insert("1.0", content)
        widget.config(state=tk.DISABLED)

    def show_message(self, message: str) -> None:
        messagebox.showinfo(AppConfig.APP_NAME, message, parent=self.root)

    # ========================================================================
    # EVENT HANDLERS
    # ========================================================================

    def on_add_car(self) -> None:
        success, message = self._run(self.controller.add_car, self.plate_add_var.get())
        if success:
            self.plate_add_var.set("")
        self.show_message(message)

    def on_remove_car(self) -> None:
        success, message = self._run(self.controller.remove_car, self.plate_remove_var.get())
        if success:
            self.plate_remove_var.set("")
        self.show_message(message)

    def on_clone_car(self) -> None:
        try:
            success, message, text = self.controller.clone_car(self.plate_clone_var.get())
        except Exception as e:
            self.logger.exception("Error cloning car")
            messagebox.showerror("System Error", str(e), parent=self.root)
            return
        self._set_text(self.clone_text, text)
        self.show_message(message)

    def _run(self, action, license_plate: str) -> Tuple[bool, str]:
        try:
            return action(license_plate)
        except Exception as e:
            self.logger.exception(f"Error handling {action.__name__}")
            return False, f"System error: {e}"

    # ========================================================================
    # RENDERING
    # ========================================================================

    def refresh_all(self) -> None:
        self.update_status()
        self.update_stats()
        self.update_history()

    def update_status(self) -> None:
        self._set_text(self.status_text, self.controller.status_text())

    def update_stats(self) -> None:
        self._set_text(self.stats_text, self.controller.statistics_text())

    def update_history(self) -> None:
        for item in self.history_tree.get_children():
            self.history_tree.delete(item)
        for row in self.controller.history_rows():
            self.history_tree.insert("", tk.END, values=row)

    def run(self) -> None:
        self.logger.info("Application starting...")
        try:
            self.root.mainloop()
        finally:
            self.logger.info("Application shutting down...")
