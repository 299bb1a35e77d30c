import sys
import traceback

from sqlalchemy.exc import SQLAlchemyError

import app.models  # noqa: F401  (registriert alle Tabellen an Base)
from app.database import Base, engine
from app.utils.logging_config import setup_logging

logger = setup_logging()


def main() -> int:
    """
    Legt alle Tabellen an, bestehende Tabellen bleiben unverändert.
    Gibt Exit-Code zurück: 0 = Erfolg, 1 = Fehler
    """
    logger.info("Datenbank-Initialisierung gestartet")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Tabellen angelegt: {', '.join(sorted(Base.metadata.tables))}")
        return 0
    except SQLAlchemyError as e:
        logger.error(f"Initialisierung fehlgeschlagen: {e}")
        logger.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    sys.exit(main())
