import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(db_index=True, max_length=255)),
                ("password", models.CharField(max_length=255)),
                (
                    "profile_image",
                    models.CharField(blank=True, max_length=1024, null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="UserFollow",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("followed_at", models.DateTimeField(auto_now_add=True)),
                (
                    "followee",
                    models.ForeignKey(
                        db_column="followee_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="follower_links",
                        to="directory.user",
                    ),
                ),
                (
                    "follower",
                    models.ForeignKey(
                        db_column="follower_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="followee_links",
                        to="directory.user",
                    ),
                ),
            ],
            options={
                "db_table": "user_follows",
                "ordering": ["id"],
                "unique_together": {("follower", "followee")},
            },
        ),
        migrations.AddField(
            model_name="user",
            name="followees",
            field=models.ManyToManyField(
                related_name="followers",
                through="directory.UserFollow",
                through_fields=("follower", "followee"),
                to="directory.user",
            ),
        ),
    ]
