# communicator/infra/table_client.py
from typing import Optional

from azure.data.tables.aio import TableServiceClient


def get_table_service_client(conn_str: Optional[str]) -> TableServiceClient:
    """
    One service client per process; the repositories take their
    table clients from it. Close it on shutdown.
    """
    if not conn_str:
        raise RuntimeError("AZURE_STORAGE_CONNECTION_STRING is not configured")

    return TableServiceClient.from_connection_string(conn_str=conn_str)
