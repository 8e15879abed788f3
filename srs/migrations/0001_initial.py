import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="KanjiReview",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kanji_character", models.CharField(max_length=1)),
                ("interval", models.FloatField(default=0.0)),
                ("repetition", models.PositiveIntegerField(default=0)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("due_date", models.DateField()),
                ("last_reviewed_at", models.DateTimeField()),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="kanji_reviews",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["user", "due_date"], name="srs_user_due_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "kanji_character"), name="srs_unique_user_kanji"),
                    models.CheckConstraint(condition=models.Q(("ease_factor__gte", 1.3)), name="srs_ease_factor_floor"),
                ],
            },
        ),
    ]
