from .data_ingestion import DataIngestion
