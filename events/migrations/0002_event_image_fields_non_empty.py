from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("events", "0001_initial"),
    ]

    operations = [
        migrations.RemoveConstraint(
            model_name="event",
            name="event_image_fields_paired",
        ),
        migrations.AddConstraint(
            model_name="event",
            constraint=models.CheckConstraint(
                condition=models.Q(
                    models.Q(image_id__isnull=True, image_url__isnull=True),
                    models.Q(
                        image_id__gt="",
                        image_id__isnull=False,
                        image_url__gt="",
                        image_url__isnull=False,
                    ),
                    _connector="OR",
                ),
                name="event_image_fields_paired",
            ),
        ),
    ]
