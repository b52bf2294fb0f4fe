# backend/export_data.py
import argparse
import enum
import json
import os
import sys

import pandas as pd

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from sqlalchemy import select
from sqlalchemy.engine import Engine

from database import engine as default_engine
from models.company_info import CompanyInfo
from models.message import Message
from models.resource import Resource
from models.service import Service
from models.solution import Solution
from models.users import User

# Exported tables; the users table never includes password hashes
EXPORTS = {
    "users": select(User.id, User.username, User.email, User.is_admin, User.created_at),
    "services": select(Service),
    "solutions": select(Solution),
    "resources": select(Resource),
    "companyInfo": select(CompanyInfo),
    "messages": select(Message),
}


def _plain(value):
    return value.value if isinstance(value, enum.Enum) else value


def _records(df: pd.DataFrame) -> list:
    for column in df.columns:
        if df[column].dtype == object:
            df[column] = df[column].map(_plain)
    # Round-trip through pandas JSON so timestamps come out as ISO strings
    return json.loads(df.to_json(orient="records", date_format="iso"))


def export_data(engine: Engine = default_engine) -> dict:
    data = {}
    with engine.connect() as conn:
        for name, query in EXPORTS.items():
            df = pd.read_sql(query, conn)
            data[name] = _records(df)
    return data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export site content to a JSON file")
    parser.add_argument("-o", "--output", default="database-export.json")
    args = parser.parse_args(argv)

    data = export_data()
    with open(args.output, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, ensure_ascii=False)

    counts = ", ".join(f"{name}: {len(rows)}" for name, rows in data.items())
    print(f"Data exported successfully to {args.output} ({counts})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
