#!/usr/bin/env python3
"""
Users CRUD API — Local Management Tool

Single entry point for running and maintaining the service locally.
Usage: python manage.py <command> [options]
"""

import json
import logging
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List


# ═══════════════════════════════════════════════════════════
#  Logging Setup
# ═══════════════════════════════════════════════════════════

class ColorFormatter(logging.Formatter):
    """Console formatter with ANSI colors and level symbols."""

    COLORS = {
        "INFO": "\033[96m",        # Cyan
        "SUCCESS": "\033[92m",     # Green
        "WARNING": "\033[93m",     # Yellow
        "ERROR": "\033[91m",       # Red
        "CRITICAL": "\033[91m\033[1m",  # Bold Red
        "DEBUG": "\033[94m",       # Blue
        "HEADER": "\033[95m",      # Magenta
        "BOLD": "\033[1m",
        "RESET": "\033[0m",
    }

    SYMBOLS = {
        "INFO": "→",
        "SUCCESS": "✓",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "☠",
        "DEBUG": "•",
        "STEP": "▶",
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.platform != "win32"

    def _colorize(self, text: str, color_name: str) -> str:
        if not self.use_colors:
            return text
        color = self.COLORS.get(color_name, "")
        return f"{color}{text}{self.COLORS['RESET']}" if color else text

    def format(self, record: logging.LogRecord) -> str:
        msg = str(record.msg)

        if "[SUCCESS]" in msg:
            symbol, color = self.SYMBOLS["SUCCESS"], "SUCCESS"
        elif "[WARNING]" in msg:
            symbol, color = self.SYMBOLS["WARNING"], "WARNING"
        elif "[ERROR]" in msg:
            symbol, color = self.SYMBOLS["ERROR"], "ERROR"
        elif "[STEP]" in msg:
            symbol, color = self.SYMBOLS["STEP"], "INFO"
        else:
            symbol, color = self.SYMBOLS.get(record.levelname, ""), record.levelname

        # Headers and indented lines carry no symbol
        if symbol and not msg.startswith(("===", " ", "\n")):
            record.msg = f"{symbol} {msg}"

        if self.use_colors:
            if msg.lstrip("\n").startswith("==="):
                record.msg = self._colorize(str(record.msg), "HEADER")
            else:
                record.msg = self._colorize(str(record.msg), color)

        return super().format(record)


# --- Bootstrap logger --------------------------------------------------------
_log_dir = "logs"
os.makedirs(_log_dir, exist_ok=True)
_log_file = os.path.join(_log_dir, f"manage-{datetime.now():%Y%m%d}.log")

_file_handler = logging.FileHandler(_log_file, encoding="utf-8")
_file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

_console_handler = logging.StreamHandler()
_console_handler.setFormatter(ColorFormatter())

logging.basicConfig(level=logging.INFO, handlers=[_file_handler, _console_handler])
logger = logging.getLogger("manage")

BACKEND_DIR = Path(__file__).resolve().parent / "backend"

# Lets the commands import users_api without `pip install -e .`
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


# ═══════════════════════════════════════════════════════════
#  Service Manager
# ═══════════════════════════════════════════════════════════

class ServiceManager:
    """Runs and maintains the users API from the backend/ directory."""

    def __init__(self, host: str = "localhost", port: int = 5000, database_path: str | None = None):
        self.host = host
        self.port = port
        self.database_path = database_path
        self.base_url = f"http://{host}:{port}"

    @classmethod
    def from_settings(cls) -> "ServiceManager":
        from users_api.core.config import settings

        return cls(port=settings.PORT, database_path=settings.SQLITE_PATH)

    # ─── Helpers ──────────────────────────────────────────
    def _python_module(self, module: str) -> List[str]:
        return [sys.executable, "-m", module]

    def _run(self, cmd: List[str], check: bool = True) -> subprocess.CompletedProcess:
        logger.info(f"[STEP] Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd, check=check, text=True, capture_output=True, cwd=BACKEND_DIR
            )
            if result.stdout:
                for line in result.stdout.strip().splitlines():
                    if line.strip():
                        logger.info(f"  {line.strip()}")
            if result.stderr:
                for line in result.stderr.strip().splitlines():
                    if line.strip():
                        logger.warning(f"  {line.strip()}")
            return result
        except subprocess.CalledProcessError as exc:
            logger.error(f"Command failed (exit {exc.returncode})")
            if exc.stderr:
                logger.error(f"  {exc.stderr.strip()}")
            raise

    def _resolve_database(self) -> Path | None:
        if not self.database_path:
            return None
        path = Path(self.database_path)
        return path if path.is_absolute() else BACKEND_DIR / path

    def _get_json(self, path: str) -> object:
        import urllib.request

        with urllib.request.urlopen(f"{self.base_url}{path}", timeout=10) as resp:
            return json.loads(resp.read().decode())

    # ─── Core Commands ────────────────────────────────────
    def serve(self, reload: bool = False) -> None:
        """Run the API in the foreground (Ctrl-C to stop)."""
        logger.info("\n=== Starting Users API ===")
        cmd = self._python_module("uvicorn") + [
            "users_api.main:app",
            "--host", "0.0.0.0",
            "--port", str(self.port),
        ]
        if reload:
            cmd.append("--reload")
        logger.info(f"[STEP] Serving on {self.base_url}")
        try:
            subprocess.run(cmd, cwd=BACKEND_DIR)
        except KeyboardInterrupt:
            logger.info("\n[SUCCESS] Server stopped")

    # ─── Database ─────────────────────────────────────────
    def init_db(self) -> None:
        """Create the users table if needed."""
        logger.info("\n=== Database Initialisation ===")
        self._run(self._python_module("scripts.init_db"))
        logger.info("[SUCCESS] Users table ready!")

    def seed(self) -> None:
        """Insert development users."""
        logger.info("\n=== Seeding Database ===")
        logger.info("[STEP] Inserting development seed data…")
        self._run(self._python_module("scripts.seed_users"))
        logger.info("[SUCCESS] Seed data inserted!")

    def reset_db(self, assume_yes: bool = False) -> None:
        """Delete the SQLite database file."""
        logger.info("\n=== Resetting Database ===")
        db_file = self._resolve_database()
        if db_file is None:
            logger.warning("[WARNING] DATABASE_URL is not a SQLite file; nothing to reset")
            return
        if not db_file.exists():
            logger.info(f"[SUCCESS] No database at {db_file}")
            return

        if not assume_yes:
            logger.warning("This will permanently delete ALL users!")
            confirm = input("\nType 'yes' to confirm: ")
            if confirm.strip().lower() != "yes":
                logger.info("[SUCCESS] Operation cancelled")
                return

        db_file.unlink()
        logger.warning(f"[SUCCESS] Removed {db_file}")

    # ─── Smoke Test ───────────────────────────────────────
    def test(self) -> bool:
        """Quick smoke-test of a running server. Returns True when every probe passed."""
        logger.info("\n=== Smoke Test ===")
        ok = True

        try:
            logger.info("[STEP] Testing health endpoint…")
            data = self._get_json("/health")
            logger.info(f"[SUCCESS] Health: status={data.get('status')} env={data.get('env')}")
        except Exception as exc:
            logger.error(f"[ERROR] Health check failed: {exc}")
            ok = False

        try:
            logger.info("[STEP] Listing users…")
            rows = self._get_json("/users")
            logger.info(f"[SUCCESS] /users returned {len(rows)} rows")
        except Exception as exc:
            logger.error(f"[ERROR] User listing failed: {exc}")
            ok = False

        return ok

    # ─── URLs ─────────────────────────────────────────────
    def urls(self) -> None:
        """Print access URLs."""
        logger.info("\n=== Access URLs ===")
        logger.info(f"🔧  Users API:         {self.base_url}/users")
        logger.info(f"📖  Swagger Docs:      {self.base_url}/docs")
        logger.info(f"❤️   Health Check:      {self.base_url}/health")
        if self.database_path:
            logger.info(f"🗄️   SQLite Database:   {self._resolve_database()}")


# ═══════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════

USAGE = f"""
{ColorFormatter.COLORS['HEADER']}Users CRUD API — Local Management{ColorFormatter.COLORS['RESET']}
{'═' * 50}

{ColorFormatter.COLORS['BOLD']}Usage:{ColorFormatter.COLORS['RESET']} python manage.py <command> [options]

{ColorFormatter.COLORS['BOLD']}Commands:{ColorFormatter.COLORS['RESET']}
    {ColorFormatter.COLORS['INFO']}serve{ColorFormatter.COLORS['RESET']}           Run the API (--reload for auto-reload)
    {ColorFormatter.COLORS['INFO']}init-db{ColorFormatter.COLORS['RESET']}         Create the users table
    {ColorFormatter.COLORS['INFO']}seed{ColorFormatter.COLORS['RESET']}            Insert development seed data
    {ColorFormatter.COLORS['WARNING']}reset-db{ColorFormatter.COLORS['RESET']}        Delete the SQLite database (--yes to skip prompt)
    {ColorFormatter.COLORS['INFO']}test{ColorFormatter.COLORS['RESET']}            Smoke-test a running server
    {ColorFormatter.COLORS['INFO']}urls{ColorFormatter.COLORS['RESET']}            Show access URLs

{ColorFormatter.COLORS['BOLD']}Examples:{ColorFormatter.COLORS['RESET']}
    python manage.py init-db && python manage.py seed
    python manage.py serve --reload
    python manage.py reset-db --yes
"""


def main(argv: List[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    command = args[0]
    opts = args[1:]

    try:
        mgr = ServiceManager.from_settings()
        if command == "serve":
            mgr.serve(reload="--reload" in opts)
        elif command == "init-db":
            mgr.init_db()
        elif command == "seed":
            mgr.seed()
        elif command == "reset-db":
            mgr.reset_db(assume_yes="--yes" in opts)
        elif command == "test":
            if not mgr.test():
                sys.exit(1)
        elif command == "urls":
            mgr.urls()
        else:
            logger.error(f"Unknown command: {command}")
            print(USAGE)
            sys.exit(1)
    except Exception as exc:
        logger.error(f"Operation failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
