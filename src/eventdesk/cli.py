import json
import os
import sys
import typer
from pathlib import Path
from eventdesk.config import settings
from eventdesk.logging import logger, get_run_id, setup_logging

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    EventDesk CLI.
    """
    setup_logging()

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 EventDesk Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    print(f"  Run ID: {get_run_id()}")
    passed += 1

    # ── Check 2: Dashboard windows ───────────────────────────────────────────
    print("\n[Configuration]")
    print(f"  DATABASE_URL:          {settings.DATABASE_URL}")
    print(f"  API_BASE_URL:          {settings.API_BASE_URL}")
    print(f"  UPCOMING_WINDOW_DAYS:  {settings.UPCOMING_WINDOW_DAYS}")
    print(f"  RSVP_WINDOW_DAYS:      {settings.RSVP_WINDOW_DAYS}")
    print(f"  ACTIVITY_WINDOW_DAYS:  {settings.ACTIVITY_WINDOW_DAYS}")
    passed += 1

    # ── Check 3: Data directory ──────────────────────────────────────────────
    print("\n[Data Directory]")
    data_dir = Path(settings.data_dir)
    if data_dir.exists() and data_dir.is_dir():
        print(f"  {data_dir}/  ✅ Found: {data_dir.absolute()}")
        passed += 1
    else:
        print(f"  {data_dir}/  ❌ Missing: {data_dir.absolute()}")
        failures.append(f"{data_dir}/ directory not found; run `eventdesk db init`")

    # ── Check 4: DB file / directory writability ─────────────────────────────
    print("\n[Database]")
    from eventdesk.db import engine
    if engine.dialect.name != "sqlite" or not engine.url.database:
        print(f"  {engine.dialect.name} database  ⚠️  Skipped (not a SQLite file)")
    else:
        db_file = Path(engine.url.database)
        if db_file.exists():
            if os.access(db_file, os.W_OK):
                print(f"  {db_file}  ✅ Exists and writable")
                passed += 1
            else:
                print(f"  {db_file}  ❌ Exists but NOT writable")
                failures.append(f"{db_file} exists but is not writable; check file permissions")
        elif db_file.parent.exists():
            if os.access(db_file.parent, os.W_OK):
                print(f"  {db_file}  ✅ Does not exist yet; {db_file.parent} is writable")
                passed += 1
            else:
                print(f"  {db_file}  ❌ {db_file.parent} is not writable")
                failures.append(f"{db_file.parent} is not writable; db init cannot create {db_file.name}")
        else:
            print(f"  {db_file}  ⚠️  Skipped ({db_file.parent} missing)")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed, all good ✅")
        print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Initialize the database tables."""
    from eventdesk.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

@db_app.command("seed")
def seed():
    """Insert demo users, events, attendees and messages."""
    from eventdesk.db import init_db
    from eventdesk.infra.db.uow import UnitOfWork
    from eventdesk.services.seed_service import SeedService
    init_db()
    with UnitOfWork() as uow:
        summary = SeedService(uow).seed_demo()
    logger.info("Seeded demo data: %s", summary.model_dump())
    print(
        f"✅ Seeded {summary.users} user(s), {summary.events} event(s), "
        f"{summary.attendees} attendee(s), {summary.messages} message(s)."
    )


@app.command("stats")
def stats(user_id: str = typer.Argument(..., help="User to compute dashboard statistics for")):
    """Run the dashboard_get_stats tool locally and print its JSON output."""
    from eventdesk.domain.exceptions import ProviderError, ValidationError
    from eventdesk.infra.db.uow import UnitOfWork
    from eventdesk.services.dashboard_service import DashboardService
    from eventdesk.tools.catalog import build_registry
    from eventdesk.tools.dashboard import DASHBOARD_GET_STATS

    # Accept only plain integers; the tool rejects anything else.
    user_value: object = int(user_id) if user_id.lstrip("-").isdigit() else user_id
    try:
        with UnitOfWork() as uow:
            tool = build_registry(DashboardService(uow)).get(DASHBOARD_GET_STATS)
            result = tool.invoke({"userId": user_value})
    except ValidationError as e:
        print(f"❌ Invalid {e.stage}: {e.message}")
        for err in e.errors:
            print(f"   {'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}")
        raise typer.Exit(code=1)
    except ProviderError as e:
        print(f"❌ {e.message}")
        raise typer.Exit(code=1)

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))


@app.command("tools")
def tools():
    """List the registered tools."""
    from eventdesk.infra.db.uow import UnitOfWork
    from eventdesk.services.dashboard_service import DashboardService
    from eventdesk.tools.catalog import build_registry

    # Listing never calls the provider, so its UnitOfWork is never entered.
    registry = build_registry(DashboardService(UnitOfWork()))
    for tool in registry.list():
        print(f"{tool.id:<24} {tool.name}")
        print(f"{'':<24} {tool.description}")

if __name__ == "__main__":
    app()
