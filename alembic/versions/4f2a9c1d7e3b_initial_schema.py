"""initial_schema

Revision ID: 4f2a9c1d7e3b
Create Date: 2025-10-18
"""

from datetime import date
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e3b"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- candidates ---
    candidates = op.create_table(
        "candidates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("birthday", sa.Date(), nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
    )
    op.create_index("ix_candidates_email", "candidates", ["email"], unique=True)
    op.create_index(
        "ix_candidates_phone_number", "candidates", ["phone_number"], unique=True
    )

    # --- skills ---
    skills = op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), unique=True, nullable=False),
    )

    # --- candidate_skills ---
    candidate_skills = op.create_table(
        "candidate_skills",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "candidate_id",
            sa.Integer(),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "skill_id",
            sa.Integer(),
            sa.ForeignKey("skills.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "candidate_id", "skill_id", name="uq_candidate_skills_candidate_skill"
        ),
    )
    op.create_index(
        "ix_candidate_skills_candidate_id", "candidate_skills", ["candidate_id"]
    )
    op.create_index("ix_candidate_skills_skill_id", "candidate_skills", ["skill_id"])

    # --- seed data ---
    op.bulk_insert(
        skills,
        [
            {"id": 1, "name": "C#"},
            {"id": 2, "name": "JavaScript"},
            {"id": 3, "name": "SQL"},
            {"id": 4, "name": "English"},
            {"id": 5, "name": "Database Design"},
            {"id": 6, "name": "Project Management"},
            {"id": 7, "name": "Russian"},
            {"id": 8, "name": "German"},
        ],
    )
    op.bulk_insert(
        candidates,
        [
            {"id": 1, "name": "Petar Petrovic", "birthday": date(1990, 5, 24),
             "phone_number": "+381623457998", "email": "petar.petrovic@gmail.com"},
            {"id": 2, "name": "Ana Jovanovic", "birthday": date(2002, 12, 4),
             "phone_number": "+381656783207", "email": "anajovanovic@gmail.com"},
            {"id": 3, "name": "Pera Peric", "birthday": date(1986, 3, 5),
             "phone_number": "+381630096381", "email": "pera.peric@gmail.com"},
            {"id": 4, "name": "Jelena Djordjevic", "birthday": date(1999, 8, 30),
             "phone_number": "+381623358998", "email": "jelena.djordjevic@gmail.com"},
            {"id": 5, "name": "Marko Markovic", "birthday": date(2000, 5, 12),
             "phone_number": "+381612766438", "email": "marko.markovic@gmail.com"},
        ],
    )
    op.bulk_insert(
        candidate_skills,
        [
            {"id": i, "candidate_id": c, "skill_id": s}
            for i, (c, s) in enumerate(
                [(1, 1), (1, 4), (1, 5), (2, 2), (2, 4), (2, 7), (3, 1), (3, 3),
                 (3, 6), (4, 2), (4, 4), (4, 8), (5, 1), (5, 2), (5, 3)],
                start=1,
            )
        ],
    )

    # explicit ids above leave the serial sequences behind
    if op.get_bind().dialect.name == "postgresql":
        for table in ("candidates", "skills", "candidate_skills"):
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )


def downgrade() -> None:
    op.drop_table("candidate_skills")
    op.drop_table("skills")
    op.drop_index("ix_candidates_phone_number", table_name="candidates")
    op.drop_index("ix_candidates_email", table_name="candidates")
    op.drop_table("candidates")
