"""
PostgreSQL connection helpers

All direct psycopg2 access goes through this module. Connections are opened
per call with RealDictCursor so rows come back as dictionaries, and the
caller is responsible for closing them.

Author: TM3
Updated: 2025-10-17
"""
import logging
import time

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        RuntimeError if DATABASE_URL is not configured

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM products")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    return psycopg2.connect(database_url, cursor_factory=RealDictCursor)


def _close_quietly(conn):
    """Close a connection that failed its liveness check"""
    if conn is None:
        return
    try:
        conn.close()
    except psycopg2.Error as e:
        logger.debug(f"Ignoring error while closing failed connection: {e}")


def get_db_connection_dict_with_retry(max_retries=None, retry_delay=None):
    """
    Get a psycopg2 connection with RealDictCursor and automatic retry

    Retries psycopg2.OperationalError (dropped SSL sessions, server restarts)
    with exponential backoff. Any other error fails immediately.

    Args:
        max_retries: Maximum number of connection attempts (default: settings.DB_CONNECT_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: settings.DB_RETRY_DELAY)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    if max_retries is None:
        max_retries = settings.DB_CONNECT_RETRIES
    if retry_delay is None:
        retry_delay = settings.DB_RETRY_DELAY
    max_retries = max(1, max_retries)

    last_error = None

    for attempt in range(1, max_retries + 1):
        conn = None
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = get_db_connection_dict()

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            _close_quietly(conn)
            error_msg = str(e)

            if "SSL connection has been closed unexpectedly" in error_msg:
                logger.warning(f"SSL connection error on attempt {attempt}/{max_retries}: {error_msg}")
            else:
                logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {error_msg}")

            if attempt < max_retries:
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)

        except Exception as e:
            logger.error(f"Unexpected error during connection: {e}")
            _close_quietly(conn)
            raise

    logger.error(f"All {max_retries} connection attempts failed")
    raise last_error
