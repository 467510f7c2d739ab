"""initial blog schema

Revision ID: 4f1c2a9d7b10
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision = '4f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None

BigIntPK = sa.BigInteger().with_variant(sa.Integer(), 'sqlite')
LongText = sa.Text().with_variant(mysql.LONGTEXT(), 'mysql', 'mariadb')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('encrypted_password', sa.String(length=255), nullable=False),
        sa.Column('reset_password_token', sa.String(length=255), nullable=True),
        sa.Column('reset_password_sent_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('remember_created_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_table(
        'jwt_denylists',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('jti', sa.String(length=255), nullable=False),
        sa.Column('exp', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_jwt_denylists')),
        sa.UniqueConstraint('jti', name='uq_jwt_denylists_jti'),
    )
    op.create_index(op.f('ix_jwt_denylists_jti'), 'jwt_denylists', ['jti'], unique=False)
    op.create_table(
        'images',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('image', LongText, nullable=True),
        sa.Column('image_alt', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_images')),
    )
    op.create_table(
        'articles',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('short_description', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_id', BigIntPK, nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['image_id'], ['images.id'], name=op.f('fk_articles_image_id_images')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_articles')),
    )
    op.create_table(
        'comments',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('article_id', BigIntPK, nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['article_id'], ['articles.id'], name=op.f('fk_comments_article_id_articles')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_comments')),
    )
    op.create_index(op.f('ix_comments_article_id'), 'comments', ['article_id'], unique=False)
    op.create_table(
        'likes',
        sa.Column('id', BigIntPK, autoincrement=True, nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False),
        sa.Column('dislikes', sa.Integer(), nullable=False),
        sa.Column('likeable_type', sa.String(length=255), nullable=False),
        sa.Column('likeable_id', sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_likes')),
        sa.UniqueConstraint('likeable_type', 'likeable_id', name='uq_likes_likeable'),
    )


def downgrade():
    op.drop_table('likes')
    op.drop_index(op.f('ix_comments_article_id'), table_name='comments')
    op.drop_table('comments')
    op.drop_table('articles')
    op.drop_table('images')
    op.drop_index(op.f('ix_jwt_denylists_jti'), table_name='jwt_denylists')
    op.drop_table('jwt_denylists')
    op.drop_table('users')
