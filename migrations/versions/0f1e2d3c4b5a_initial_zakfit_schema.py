"""initial zakfit schema

Revision ID: 0f1e2d3c4b5a
Revises: 
Create Date: 2025-01-06 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision = '0f1e2d3c4b5a'
down_revision = None
branch_labels = None
depends_on = None


def _timestamp():
    return sa.DateTime().with_variant(mysql.DATETIME(fsp=6), 'mysql')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('surname', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('height', sa.Float(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('health_goal', sa.Integer(), nullable=True),
        sa.Column('diet_preferences', sa.JSON(), nullable=True),
        sa.Column('created_at', _timestamp(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'type_activities',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False, unique=True),
        sa.Column('created_at', _timestamp(), nullable=False),
    )

    op.create_table(
        'physical_activities',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('duration', sa.Float(), nullable=False),
        sa.Column('calories_burned', sa.Float(), nullable=True),
        sa.Column('date', _timestamp(), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('type_activity_id', sa.Uuid(), sa.ForeignKey('type_activities.id'), nullable=False),
        sa.Column('created_at', _timestamp(), nullable=False),
    )
    op.create_index('ix_physical_activities_user_id', 'physical_activities', ['user_id'])

    op.create_table(
        'goal_activities',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('frequency', sa.Integer(), nullable=True),
        sa.Column('calories_goal', sa.Float(), nullable=True),
        sa.Column('duration_goal', sa.Float(), nullable=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('type_activity_id', sa.Uuid(), sa.ForeignKey('type_activities.id'), nullable=False),
        sa.Column('created_at', _timestamp(), nullable=False),
    )
    op.create_index('ix_goal_activities_user_id', 'goal_activities', ['user_id'])

    op.create_table(
        'foods',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('proteins', sa.Float(), nullable=False),
        sa.Column('carbs', sa.Float(), nullable=False),
        sa.Column('fats', sa.Float(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('created_at', _timestamp(), nullable=False),
    )

    op.create_table(
        'meals',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('meal_type', sa.String(length=50), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('date', _timestamp(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', _timestamp(), nullable=False),
    )
    op.create_index('ix_meals_user_id', 'meals', ['user_id'])

    op.create_table(
        'compositions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('food_id', sa.Uuid(), sa.ForeignKey('foods.id'), nullable=False),
        sa.Column('meal_id', sa.Uuid(), sa.ForeignKey('meals.id'), nullable=False),
        sa.Column('created_at', _timestamp(), nullable=False),
    )
    op.create_index('ix_compositions_food_id', 'compositions', ['food_id'])
    op.create_index('ix_compositions_meal_id', 'compositions', ['meal_id'])


def downgrade():
    op.drop_table('compositions')
    op.drop_table('meals')
    op.drop_table('foods')
    op.drop_table('goal_activities')
    op.drop_table('physical_activities')
    op.drop_table('type_activities')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
