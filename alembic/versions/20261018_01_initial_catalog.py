"""
Initial catalog schema.

- users: accounts (unique lower-cased email, salted password hash)
- movies: catalog entries with derived rating / comments_count
- comments: per-movie reviews (rating 1..10)
- to_watch_items: per-user bookmarks, composite PK (user_id, movie_id)
"""

from alembic import op
import sqlalchemy as sa

# Revision identifiers, used by Alembic.
revision = "20261018_01_initial_catalog"
down_revision = None
branch_labels = None
depends_on = None

GENRES = ("comedy", "crime", "documentary", "drama", "horror", "family", "romance", "scifi", "thriller")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=15), nullable=False),
        sa.Column("avatar_uri", sa.String(length=512), server_default="", nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("length(email) > 0", name="ck_users_email_not_blank"),
        sa.CheckConstraint("length(name) BETWEEN 1 AND 15", name="ck_users_name_length"),
    )

    # --- movies ---
    op.create_table(
        "movies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=1024), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("genre", sa.Enum(*GENRES, name="movie_genre", native_enum=False, length=20), nullable=False),
        sa.Column("release_year", sa.Integer(), nullable=False),
        sa.Column("director", sa.String(length=50), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("actors", sa.JSON(), nullable=False),
        sa.Column("rating", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("comments_count", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("preview_video_uri", sa.String(length=512), nullable=False),
        sa.Column("video_uri", sa.String(length=512), nullable=False),
        sa.Column("poster_uri", sa.String(length=512), nullable=False),
        sa.Column("background_image_uri", sa.String(length=512), nullable=False),
        sa.Column("background_color", sa.String(length=32), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_movies"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_movies_user_id_users", ondelete="CASCADE"),
        sa.CheckConstraint("length(title) >= 2", name="ck_movies_title_min_length"),
        sa.CheckConstraint("length(description) >= 20", name="ck_movies_description_min_length"),
        sa.CheckConstraint("length(director) >= 2", name="ck_movies_director_min_length"),
        sa.CheckConstraint("duration_minutes > 0", name="ck_movies_duration_positive"),
        sa.CheckConstraint("rating >= 0 AND rating <= 10", name="ck_movies_rating_range"),
        sa.CheckConstraint("comments_count >= 0", name="ck_movies_comments_count_non_negative"),
    )
    op.create_index("ix_movies_user_id", "movies", ["user_id"], unique=False)
    op.create_index("ix_movies_published_at", "movies", ["published_at"], unique=False)
    op.create_index("ix_movies_genre_published_at", "movies", ["genre", "published_at"], unique=False)

    # --- comments ---
    op.create_table(
        "comments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("text", sa.String(length=1024), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("movie_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_comments"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_comments_user_id_users", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["movie_id"], ["movies.id"], name="fk_comments_movie_id_movies", ondelete="CASCADE"),
        sa.CheckConstraint('length("text") >= 5', name="ck_comments_text_min_length"),
        sa.CheckConstraint("rating >= 1 AND rating <= 10", name="ck_comments_rating_range"),
    )
    op.create_index("ix_comments_user_id", "comments", ["user_id"], unique=False)
    op.create_index("ix_comments_movie_id", "comments", ["movie_id"], unique=False)
    op.create_index("ix_comments_movie_created", "comments", ["movie_id", "created_at"], unique=False)

    # --- to_watch_items ---
    op.create_table(
        "to_watch_items",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("movie_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "movie_id", name="pk_to_watch_items"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_to_watch_items_user_id_users", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["movie_id"], ["movies.id"], name="fk_to_watch_items_movie_id_movies", ondelete="CASCADE"),
    )
    op.create_index("ix_to_watch_items_movie_id", "to_watch_items", ["movie_id"], unique=False)
    op.create_index("ix_to_watch_items_user_created", "to_watch_items", ["user_id", "created_at"], unique=False)


def downgrade() -> None:
    op.drop_table("to_watch_items")
    op.drop_table("comments")
    op.drop_table("movies")
    op.drop_table("users")
