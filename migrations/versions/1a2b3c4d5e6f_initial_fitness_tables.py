"""initial fitness tables

Revision ID: 1a2b3c4d5e6f
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=100), nullable=False, unique=True),
            sa.Column('email', sa.String(length=255), nullable=False, unique=True),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('first_name', sa.String(length=255), nullable=True),
            sa.Column('last_name', sa.String(length=255), nullable=True),
            sa.Column('date_of_birth', sa.Date(), nullable=True),
            sa.Column('gender', sa.String(length=10), nullable=True),
            sa.Column('height_cm', sa.Integer(), nullable=True),
            sa.Column('current_weight_kg', sa.Numeric(5, 2), nullable=True),
            sa.Column('goal_weight_kg', sa.Numeric(5, 2), nullable=True),
            sa.Column('activity_level', sa.String(length=30), nullable=True),
            sa.Column('timezone', sa.String(length=64), nullable=True),
            *_timestamps(),
        )

    if not insp.has_table('food_items'):
        op.create_table(
            'food_items',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('brand', sa.String(length=255), nullable=True),
            sa.Column('serving_size', sa.Numeric(8, 2), nullable=False),
            sa.Column('serving_unit', sa.String(length=50), nullable=False),
            sa.Column('calories_per_serving', sa.Numeric(8, 2), nullable=False, server_default='0'),
            sa.Column('protein_g', sa.Numeric(8, 2), nullable=True),
            sa.Column('carbs_g', sa.Numeric(8, 2), nullable=True),
            sa.Column('fat_g', sa.Numeric(8, 2), nullable=True),
            sa.Column('fiber_g', sa.Numeric(8, 2), nullable=True),
            sa.Column('sugar_g', sa.Numeric(8, 2), nullable=True),
            sa.Column('sodium_mg', sa.Numeric(8, 2), nullable=True),
            sa.Column('verified', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
            *_timestamps(),
        )
        op.create_index('ix_food_items_name', 'food_items', ['name'])

    if not insp.has_table('exercises'):
        op.create_table(
            'exercises',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('category', sa.String(length=20), nullable=False),
            sa.Column('met_value', sa.Numeric(5, 2), nullable=True),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('instructions', sa.Text(), nullable=True),
            sa.Column('muscle_groups', sa.JSON(), nullable=True),
            sa.Column('equipment_needed', sa.JSON(), nullable=True),
            sa.Column('difficulty_level', sa.String(length=50), nullable=True),
            sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
            *_timestamps(),
        )
        op.create_index('ix_exercises_name', 'exercises', ['name'])

    if not insp.has_table('food_diary_entries'):
        op.create_table(
            'food_diary_entries',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('food_item_id', sa.Integer(), sa.ForeignKey('food_items.id'), nullable=True),
            sa.Column('meal_type', sa.String(length=20), nullable=False),
            sa.Column('quantity', sa.Numeric(8, 2), nullable=True),
            sa.Column('serving_unit', sa.String(length=50), nullable=True),
            sa.Column('calories', sa.Numeric(8, 2), nullable=True),
            sa.Column('logged_date', sa.Date(), nullable=False),
            sa.Column('logged_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
        )
        op.create_index('ix_food_diary_entries_user_date', 'food_diary_entries', ['user_id', 'logged_date'])

    if not insp.has_table('exercise_diary_entries'):
        op.create_table(
            'exercise_diary_entries',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False),
            sa.Column('duration_minutes', sa.Integer(), nullable=True),
            sa.Column('calories_burned', sa.Numeric(8, 2), nullable=True),
            sa.Column('sets', sa.Integer(), nullable=True),
            sa.Column('reps', sa.Integer(), nullable=True),
            sa.Column('weight_used', sa.Numeric(8, 2), nullable=True),
            sa.Column('distance', sa.Numeric(8, 2), nullable=True),
            sa.Column('distance_unit', sa.String(length=10), nullable=True),
            sa.Column('logged_date', sa.Date(), nullable=False),
            sa.Column('logged_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
        )
        op.create_index('ix_exercise_diary_entries_user_date', 'exercise_diary_entries', ['user_id', 'logged_date'])

    if not insp.has_table('user_goals'):
        op.create_table(
            'user_goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('goal_type', sa.String(length=20), nullable=False),
            sa.Column('target_weight_kg', sa.Numeric(5, 2), nullable=True),
            sa.Column('target_date', sa.Date(), nullable=True),
            sa.Column('weekly_goal_kg', sa.Numeric(4, 2), nullable=True),
            sa.Column('daily_calorie_goal', sa.Integer(), nullable=True),
            sa.Column('daily_protein_goal', sa.Numeric(6, 2), nullable=True),
            sa.Column('daily_carbs_goal', sa.Numeric(6, 2), nullable=True),
            sa.Column('daily_fat_goal', sa.Numeric(6, 2), nullable=True),
            sa.Column('daily_exercise_minutes', sa.Integer(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
            *_timestamps(),
        )
        op.create_index('ix_user_goals_user_id', 'user_goals', ['user_id'])
        # Partial unique index: one active goal per user
        op.create_index(
            'uq_user_goals_one_active',
            'user_goals',
            ['user_id'],
            unique=True,
            postgresql_where=sa.text('is_active'),
            sqlite_where=sa.text('is_active = 1'),
        )

    if not insp.has_table('daily_notes'):
        op.create_table(
            'daily_notes',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.UniqueConstraint('user_id', 'date', name='uq_daily_notes_user_date'),
        )

    if not insp.has_table('weight_logs'):
        op.create_table(
            'weight_logs',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('weight_kg', sa.Numeric(5, 2), nullable=False),
            sa.Column('neck_cm', sa.Numeric(5, 2), nullable=True),
            sa.Column('waist_cm', sa.Numeric(5, 2), nullable=True),
            sa.Column('hips_cm', sa.Numeric(5, 2), nullable=True),
            sa.Column('logged_date', sa.Date(), nullable=False),
            sa.Column('logged_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.UniqueConstraint('user_id', 'logged_date', name='uq_weight_logs_user_date'),
        )


def downgrade():
    op.drop_table('weight_logs')
    op.drop_table('daily_notes')
    op.drop_index('uq_user_goals_one_active', table_name='user_goals')
    op.drop_index('ix_user_goals_user_id', table_name='user_goals')
    op.drop_table('user_goals')
    op.drop_index('ix_exercise_diary_entries_user_date', table_name='exercise_diary_entries')
    op.drop_table('exercise_diary_entries')
    op.drop_index('ix_food_diary_entries_user_date', table_name='food_diary_entries')
    op.drop_table('food_diary_entries')
    op.drop_index('ix_exercises_name', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_food_items_name', table_name='food_items')
    op.drop_table('food_items')
    op.drop_table('users')
