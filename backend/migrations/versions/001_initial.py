"""initial schema — team signal

Revision ID: 001_initial
Create Date: 19/10/2026
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '001_initial'
down_revision = None

# Valeurs des Enums
WOW_LEVEL = ('shu', 'ha', 'ri')
TEAM_PLAN = ('free', 'pro')
SESSION_STATUS = ('draft', 'active', 'closed')
WOW_ANGLE = (
    'scrum', 'flow', 'ownership', 'collaboration', 'technical_excellence',
    'refinement', 'planning', 'retro', 'demo', 'obeya', 'dependencies',
    'psychological_safety', 'devops', 'stakeholder', 'leadership',
)

def upgrade() -> None:
    # ── 1. CREATION MANUELLE DES TYPES ENUM (SÉCURISÉE) ──
    enums = {
        "wowlevel": WOW_LEVEL,
        "teamplan": TEAM_PLAN,
        "sessionstatus": SESSION_STATUS,
        "wowangle": WOW_ANGLE,
    }

    for name, values in enums.items():
        vals_str = ", ".join([f"'{v}'" for v in values])
        op.execute(f"""
            DO $$
            BEGIN
                IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = '{name}') THEN
                    CREATE TYPE {name} AS ENUM ({vals_str});
                END IF;
            END $$;
        """)

    # ── 2. CREATION DES TABLES ──
    # postgresql.ENUM(..., create_type=False) : types déjà créés ci-dessus

    op.create_table("teams",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("expected_team_size", sa.Integer, nullable=True),
        sa.Column("wow_level", postgresql.ENUM(*WOW_LEVEL, name='wowlevel', create_type=False), nullable=False, server_default="shu"),
        sa.Column("plan", postgresql.ENUM(*TEAM_PLAN, name='teamplan', create_type=False), nullable=False, server_default="free"),
        sa.Column("level_updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table("vibe_checkins",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("team_id", sa.Integer, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("device_id", sa.String, nullable=False),
        sa.Column("score", sa.Integer, nullable=False),
        sa.Column("entry_date", sa.Date, nullable=False, index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("team_id", "device_id", "entry_date", name="uq_vibe_team_device_day"),
        sa.CheckConstraint("score BETWEEN 1 AND 5", name="ck_vibe_score_range"),
    )

    op.create_table("wow_sessions",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("team_id", sa.Integer, sa.ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("title", sa.String, nullable=True),
        sa.Column("angle", postgresql.ENUM(*WOW_ANGLE, name='wowangle', create_type=False), nullable=False),
        sa.Column("level", postgresql.ENUM(*WOW_LEVEL, name='wowlevel', create_type=False), nullable=False, server_default="shu"),
        sa.Column("status", postgresql.ENUM(*SESSION_STATUS, name='sessionstatus', create_type=False), nullable=False, server_default="active"),
        sa.Column("focus_area", sa.String, nullable=True),
        sa.Column("experiment", sa.String, nullable=True),
        sa.Column("experiment_owner", sa.String, nullable=True),
        sa.Column("followup_date", sa.Date, nullable=True),
        sa.Column("follow_up_recorded", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("overall_score", sa.Float, nullable=True),
        sa.Column("participation_rate", sa.Float, nullable=True),
        sa.Column("response_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table("wow_responses",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("session_id", sa.Integer, sa.ForeignKey("wow_sessions.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("device_id", sa.String, nullable=False),
        sa.Column("answers", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("session_id", "device_id", name="uq_wow_session_device"),
    )

def downgrade() -> None:
    tables = ["wow_responses", "wow_sessions", "vibe_checkins", "teams"]
    for table in tables:
        op.drop_table(table)

    enums = ["wowangle", "sessionstatus", "teamplan", "wowlevel"]
    for e in enums:
        op.execute(f"DROP TYPE IF EXISTS {e}")
