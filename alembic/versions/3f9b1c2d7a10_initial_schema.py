"""initial schema

Revision ID: 3f9b1c2d7a10
Revises:
Create Date: 2026-10-18 12:04:51.208113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9b1c2d7a10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
    ]


def _audit(table: str) -> list:
    return _timestamps() + [
        sa.Column("created_by", sa.Integer(), nullable=False),
        sa.Column("updated_by", sa.Integer(), nullable=True),
        sa.Column("deleted_by", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["created_by"],
            ["user_profiles.id"],
            name=op.f(f"fk_{table}_created_by_user_profiles"),
        ),
        sa.ForeignKeyConstraint(
            ["updated_by"],
            ["user_profiles.id"],
            name=op.f(f"fk_{table}_updated_by_user_profiles"),
        ),
        sa.ForeignKeyConstraint(
            ["deleted_by"],
            ["user_profiles.id"],
            name=op.f(f"fk_{table}_deleted_by_user_profiles"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_accounts")),
    )

    op.create_table(
        "user_profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("account_id", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("avatar_url", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            name=op.f("fk_user_profiles_account_id_accounts"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_user_profiles")),
    )
    op.create_index(
        op.f("ix_user_profiles_account_id"),
        "user_profiles",
        ["account_id"],
        unique=True,
    )

    op.create_table(
        "drivers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("abbreviation", sa.String(length=3), nullable=False),
        sa.Column("country_abbreviation", sa.String(length=3), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_drivers")),
        sa.UniqueConstraint("abbreviation", name=op.f("uq_drivers_abbreviation")),
    )

    op.create_table(
        "constructors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        sa.Column("country_abbreviation", sa.String(length=3), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_constructors")),
        sa.UniqueConstraint("name", name=op.f("uq_constructors_name")),
    )

    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        *_audit("teams"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["user_profiles.id"],
            name=op.f("fk_teams_user_id_user_profiles"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_teams")),
    )
    op.create_index(op.f("ix_teams_user_id"), "teams", ["user_id"], unique=True)

    op.create_table(
        "team_drivers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("driver_id", sa.Integer(), nullable=False),
        sa.Column("slot_position", sa.Integer(), nullable=False),
        *_audit("team_drivers"),
        sa.ForeignKeyConstraint(
            ["team_id"],
            ["teams.id"],
            name=op.f("fk_team_drivers_team_id_teams"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["driver_id"],
            ["drivers.id"],
            name=op.f("fk_team_drivers_driver_id_drivers"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_team_drivers")),
        sa.UniqueConstraint(
            "team_id", "slot_position", name="uq_team_drivers_team_slot"
        ),
        sa.UniqueConstraint(
            "team_id", "driver_id", name="uq_team_drivers_team_driver"
        ),
    )
    op.create_index(
        op.f("ix_team_drivers_team_id"), "team_drivers", ["team_id"], unique=False
    )
    op.create_index(
        op.f("ix_team_drivers_driver_id"), "team_drivers", ["driver_id"], unique=False
    )

    op.create_table(
        "team_constructors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("constructor_id", sa.Integer(), nullable=False),
        sa.Column("slot_position", sa.Integer(), nullable=False),
        *_audit("team_constructors"),
        sa.ForeignKeyConstraint(
            ["team_id"],
            ["teams.id"],
            name=op.f("fk_team_constructors_team_id_teams"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["constructor_id"],
            ["constructors.id"],
            name=op.f("fk_team_constructors_constructor_id_constructors"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_team_constructors")),
        sa.UniqueConstraint(
            "team_id", "slot_position", name="uq_team_constructors_team_slot"
        ),
        sa.UniqueConstraint(
            "team_id", "constructor_id", name="uq_team_constructors_team_constructor"
        ),
    )
    op.create_index(
        op.f("ix_team_constructors_team_id"),
        "team_constructors",
        ["team_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_team_constructors_constructor_id"),
        "team_constructors",
        ["constructor_id"],
        unique=False,
    )

    op.create_table(
        "leagues",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("max_teams", sa.Integer(), nullable=False),
        sa.Column("is_private", sa.Boolean(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        *_audit("leagues"),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["user_profiles.id"],
            name=op.f("fk_leagues_owner_id_user_profiles"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_leagues")),
    )
    op.create_index(op.f("ix_leagues_owner_id"), "leagues", ["owner_id"], unique=False)

    op.create_table(
        "league_teams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("league_id", sa.Integer(), nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        *_audit("league_teams"),
        sa.ForeignKeyConstraint(
            ["league_id"],
            ["leagues.id"],
            name=op.f("fk_league_teams_league_id_leagues"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["team_id"],
            ["teams.id"],
            name=op.f("fk_league_teams_team_id_teams"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_league_teams")),
        sa.UniqueConstraint(
            "league_id", "team_id", name="uq_league_teams_league_team"
        ),
    )
    op.create_index(
        op.f("ix_league_teams_league_id"), "league_teams", ["league_id"], unique=False
    )
    op.create_index(
        op.f("ix_league_teams_team_id"), "league_teams", ["team_id"], unique=False
    )

    op.create_table(
        "league_invites",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("league_id", sa.Integer(), nullable=False),
        sa.Column("token", sa.String(length=64), nullable=False),
        *_audit("league_invites"),
        sa.ForeignKeyConstraint(
            ["league_id"],
            ["leagues.id"],
            name=op.f("fk_league_invites_league_id_leagues"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_league_invites")),
    )
    op.create_index(
        op.f("ix_league_invites_league_id"),
        "league_invites",
        ["league_id"],
        unique=True,
    )
    op.create_index(
        op.f("ix_league_invites_token"), "league_invites", ["token"], unique=True
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_league_invites_token"), table_name="league_invites")
    op.drop_index(op.f("ix_league_invites_league_id"), table_name="league_invites")
    op.drop_table("league_invites")
    op.drop_index(op.f("ix_league_teams_team_id"), table_name="league_teams")
    op.drop_index(op.f("ix_league_teams_league_id"), table_name="league_teams")
    op.drop_table("league_teams")
    op.drop_index(op.f("ix_leagues_owner_id"), table_name="leagues")
    op.drop_table("leagues")
    op.drop_index(
        op.f("ix_team_constructors_constructor_id"), table_name="team_constructors"
    )
    op.drop_index(op.f("ix_team_constructors_team_id"), table_name="team_constructors")
    op.drop_table("team_constructors")
    op.drop_index(op.f("ix_team_drivers_driver_id"), table_name="team_drivers")
    op.drop_index(op.f("ix_team_drivers_team_id"), table_name="team_drivers")
    op.drop_table("team_drivers")
    op.drop_index(op.f("ix_teams_user_id"), table_name="teams")
    op.drop_table("teams")
    op.drop_table("constructors")
    op.drop_table("drivers")
    op.drop_index(op.f("ix_user_profiles_account_id"), table_name="user_profiles")
    op.drop_table("user_profiles")
    op.drop_table("accounts")
