import uuid
from datetime import date, datetime, timedelta, timezone

from medvault.db import models, schemas
from medvault.db.repositories import OwnedRecordRepository
from medvault.db.repositories import users as user_repo


def _user(db, name):
    return user_repo.get_or_create_user(db, email=f"{name}@example.com", display_name=name)


def test_create_list_update_delete_scoped_to_owner(db_session):
    alice = _user(db_session, "alice")
    bob = _user(db_session, "bob")
    repo = OwnedRecordRepository(models.ChronicCondition)

    created = repo.create_owned(
        db_session, alice.id, schemas.ChronicConditionCreate(condition="Asthma", severity="Mild")
    )
    assert created.id is not None
    assert created.owner_id == alice.id

    assert [r.id for r in repo.list_owned(db_session, alice.id)] == [created.id]
    assert repo.list_owned(db_session, bob.id) == []

    # Another owner cannot see, change or remove it
    assert repo.get_owned(db_session, bob.id, created.id) is None
    assert repo.update_owned(db_session, bob.id, created.id, {"severity": "Severe"}) is None
    assert repo.delete_owned(db_session, bob.id, created.id) is None

    updated = repo.update_owned(db_session, alice.id, created.id, {"severity": "Severe"})
    assert updated.severity == "Severe"
    assert updated.condition == "Asthma"

    deleted = repo.delete_owned(db_session, alice.id, created.id)
    assert deleted.condition == "Asthma"
    assert repo.list_owned(db_session, alice.id) == []


def test_update_never_moves_ownership(db_session):
    alice = _user(db_session, "alice")
    bob = _user(db_session, "bob")
    repo = OwnedRecordRepository(models.Allergy)
    allergy = repo.create_owned(db_session, alice.id, schemas.AllergyCreate(type="Drug", name="Penicillin"))

    repo.update_owned(db_session, alice.id, allergy.id, {"owner_id": bob.id, "notes": "seen by GP"})

    assert repo.get_owned(db_session, alice.id, allergy.id).notes == "seen by GP"
    assert repo.get_owned(db_session, bob.id, allergy.id) is None


def test_server_defaults_applied_on_create(db_session):
    alice = _user(db_session, "alice")
    repo = OwnedRecordRepository(
        models.Appointment,
        sort_key="date",
        descending=False,
        server_defaults={"status": models.APPOINTMENT_STATUS_SCHEDULED},
    )
    appt = repo.create_owned(
        db_session,
        alice.id,
        schemas.AppointmentCreate(doctor_name="Dr. Lee", date=date(2024, 5, 1), time="10:00", type="Checkup"),
    )
    assert appt.status == "Scheduled"


def test_list_orders_by_sort_key_then_creation(db_session):
    alice = _user(db_session, "alice")
    repo = OwnedRecordRepository(models.MedicalRecord, sort_key="date", descending=True)
    repo.create_owned(
        db_session, alice.id, schemas.MedicalRecordCreate(record_type="Lab", title="older", date=date(2023, 1, 1))
    )
    same_day_first = repo.create_owned(
        db_session, alice.id, schemas.MedicalRecordCreate(record_type="Lab", title="first", date=date(2024, 1, 1))
    )
    same_day_second = repo.create_owned(
        db_session, alice.id, schemas.MedicalRecordCreate(record_type="Lab", title="second", date=date(2024, 1, 1))
    )
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    same_day_first.created_at = base
    same_day_second.created_at = base + timedelta(minutes=5)
    db_session.commit()

    titles = [r.title for r in repo.list_owned(db_session, alice.id)]
    assert titles == ["second", "first", "older"]


def test_unknown_id_is_none(db_session):
    alice = _user(db_session, "alice")
    repo = OwnedRecordRepository(models.Insurance)
    assert repo.get_owned(db_session, alice.id, uuid.uuid4()) is None
    assert repo.delete_owned(db_session, alice.id, uuid.uuid4()) is None
