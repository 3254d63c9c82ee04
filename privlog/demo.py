"""
Demo actions contrasting ``print`` with privlog.

:class:`LoggerDemo` plays the part of the sample application: each action
emits records through the category loggers, sometimes next to plain
``print`` calls, and appends a short human-readable line to an in-app
message list.
"""

import random
import threading
from datetime import datetime
from typing import Callable, List, Optional

from .console import console_print
from .logger import Category, get_logger
from .privacy import private

SAMPLE_EMAIL = "user@example.com"
SAMPLE_PASSWORD = "password123"
API_URL = "https://api.example.com/users"
LOG_LEVELS = ["DEBUG", "INFO", "NOTICE", "ERROR", "FAULT"]


class LoggerDemo:
    """Sample application state and its actions."""

    def __init__(self, subsystem=None, network_delay=2.0, rng=None, clock=None):
        """
        Args:
            subsystem: Subsystem the category loggers belong to
            network_delay: Seconds before the simulated response arrives
            rng: Random source deciding whether the simulated request succeeds
            clock: Zero-argument callable returning the current datetime
        """
        if network_delay < 0:
            raise ValueError(f"network_delay must be >= 0, got {network_delay}")
        self.network_delay = network_delay
        self.user_name = ""
        self.is_loading = False
        self.log_messages: List[str] = []

        self._rng = rng or random.Random()
        self._clock = clock or datetime.now
        self._lock = threading.Lock()

        self.app = get_logger(Category.APP, subsystem)
        self.network = get_logger(Category.NETWORK, subsystem)
        self.ui = get_logger(Category.UI, subsystem)
        self.data_model = get_logger(Category.DATA_MODEL, subsystem)

        self.ui.info("Demo view appeared")
        self.add_log_message("📱 App started")

    def add_log_message(self, message):
        timestamp = self._clock().strftime("%H:%M:%S")
        with self._lock:
            self.log_messages.append(f"[{timestamp}] {message}")

    def change_user_name(self, name):
        self.user_name = name
        self.ui.debug("User name changed: %s", private(name))

    def compare_print_vs_logger(self):
        """Log the same secrets with print and with privlog."""
        self.ui.info("Compare button tapped")
        self.app.debug("=== print vs logger comparison started ===")
        self.add_log_message("🔄 Running comparison...")

        # print leaks everything to the console
        console_print(f"❌ [PRINT] User email: {SAMPLE_EMAIL}")
        console_print(f"❌ [PRINT] Password: {SAMPLE_PASSWORD}")
        console_print("❌ [PRINT] This information is exposed!")

        self.data_model.info("✅ [LOGGER] User email: %s", private(SAMPLE_EMAIL))
        self.data_model.info("✅ [LOGGER] Password: %s", private(SAMPLE_PASSWORD))
        self.data_model.info("✅ [LOGGER] Privacy is protected")

        if self.user_name:
            self.data_model.info("Entered user name: %s", private(self.user_name))
            self.add_log_message("👤 User name processed")
        else:
            self.data_model.notice("User name is empty")
            self.add_log_message("⚠️ User name is empty")

        self.app.debug("Comparison finished")
        self.add_log_message("✅ Comparison finished - check the console output")

    def simulate_network_request(self, on_complete: Optional[Callable[[bool], None]] = None):
        """
        Start a fake API call that answers after ``network_delay`` seconds.

        Returns:
            threading.Timer delivering the response, or None when a request
            is already in flight.
        """
        self.ui.info("Network button tapped")
        with self._lock:
            in_flight = self.is_loading
            self.is_loading = True
        if in_flight:
            self.network.notice("Request already in flight, ignoring tap")
            return None

        self.network.info("🌐 Network request started")
        self.add_log_message("🌐 API call started...")
        self.network.debug("Request URL: %s", API_URL)

        timer = threading.Timer(self.network_delay, self._finish_network_request, args=(on_complete,))
        timer.daemon = True
        timer.start()
        return timer

    def _finish_network_request(self, on_complete):
        success = self._rng.random() < 0.5
        try:
            if success:
                response_code = 200
                self.network.info("✅ API call succeeded - response code: %d", response_code)
                self.network.debug("Received data size: %d bytes", 1024)
                self.add_log_message("✅ API call succeeded")
            else:
                error_code = 500
                self.network.error("❌ API call failed - error code: %d", error_code)
                self.add_log_message("❌ API call failed")
        finally:
            with self._lock:
                self.is_loading = False
        if on_complete is not None:
            on_complete(success)

    def simulate_error_handling(self):
        """Emit one record per level."""
        self.ui.info("Error button tapped")
        self.app.info("🚨 Error handling demo started")
        self.add_log_message("🚨 Error handling demo started")

        self.app.debug("Debug: detailed processing information")
        self.app.info("Info: important state change")
        self.app.notice("Notice: significant but not an error")
        self.app.error("Error: the operation failed")
        self.app.fault("Fault: a system error occurred")

        for level in LOG_LEVELS:
            self.add_log_message(f"📝 Emitted a {level} record")

        self.app.info("Error handling demo finished")
        self.add_log_message("✅ All levels emitted")

    def command_line_demo(self):
        """Emit records that are easy to grep for from a terminal."""
        self.ui.info("Command line demo tapped")
        self.app.info("📟 Command line demo started")
        self.add_log_message("📟 Command line demo started")

        self.app.info("🔍 [CMD_DEMO] Record for command line inspection")
        self.network.error("🔍 [CMD_DEMO] Sample network error")
        self.ui.debug("🔍 [CMD_DEMO] Sample UI debug information")
        self.data_model.notice("🔍 [CMD_DEMO] Data model notice")

        console_print("🔍 [CMD_DEMO_PRINT] This line was written with print")

        self.add_log_message("✅ Command line records emitted")
        self.add_log_message("💡 Filter the output for CMD_DEMO in a terminal")

    def clear_log(self):
        self.ui.info("Log cleared")
        with self._lock:
            self.log_messages.clear()
