from sqlalchemy_utils import UUIDType
from sqlalchemy import func

from shotline.app import db
from shotline.app.utils import fields, date_helpers


class BaseMixin(object):
    id = db.Column(
        UUIDType(binary=False), primary_key=True, default=fields.gen_uuid
    )

    # Audit fields
    created_at = db.Column(
        db.DateTime, default=date_helpers.get_utc_now_datetime
    )
    updated_at = db.Column(
        db.DateTime,
        default=date_helpers.get_utc_now_datetime,
        onupdate=date_helpers.get_utc_now_datetime,
    )

    def __repr__(self):
        """
        String representation based on type and name by default.
        """
        return "<%s %s>" % (type(self).__name__, getattr(self, "name", self.id))

    @classmethod
    def get(cls, id):
        """
        Shorthand to retrieve data by id.
        """
        return db.session.get(cls, id)

    @classmethod
    def get_by(cls, *criterions, **kw):
        """
        Shorthand to retrieve data by using filters. It returns the first
        element of the returned data.
        """
        return cls.query.filter(*criterions).filter_by(**kw).first()

    @classmethod
    def get_by_case_insensitive(cls, **kw):
        """
        Shorthand to retrieve data by using filters. It returns the first
        element of the returned data without checking case for any String type value.
        """
        filters = []
        for key, value in kw.items():
            column = getattr(cls, key)
            if isinstance(column.type, db.String):
                filters.append(func.lower(column) == func.lower(value))
            else:
                filters.append(column == value)

        return cls.query.filter(*filters).first()

    @classmethod
    def get_all(cls):
        """
        Shorthand to retrieve all data for a model.
        """
        return cls.query.all()

    @classmethod
    def create(cls, **kw):
        """
        Shorthand to create an entry via the database session.
        """
        try:
            instance = cls.create_no_commit(**kw)
            db.session.commit()
        except BaseException:
            db.session.rollback()
            db.session.remove()
            raise
        return instance

    @classmethod
    def create_no_commit(cls, **kw):
        """
        Shorthand to create an entry via the database session without commiting
        the request.
        """
        instance = cls(**kw)
        db.session.add(instance)
        return instance

    @classmethod
    def delete_all_by_no_commit(cls, *criterions, **kw):
        """
        Shorthand to delete data by using filters. The change is not commited.
        """
        return (
            cls.query.filter(*criterions)
            .filter_by(**kw)
            .delete(synchronize_session="fetch")
        )

    def delete(self):
        """
        Shorthand to delete an entry via the database session based on current
        instance id.
        """
        try:
            self.delete_no_commit()
            db.session.commit()
        except BaseException:
            db.session.rollback()
            db.session.remove()
            raise

    def delete_no_commit(self):
        """
        Shorthand to delete an entry via the database session based on current
        instance id. The change is not commited.
        """
        db.session.delete(self)
        return True

    def update(self, data):
        """
        Shorthand to update an entry via the database session based on current
        instance fields.
        """
        try:
            self.update_no_commit(data)
            db.session.commit()
        except BaseException:
            db.session.rollback()
            db.session.remove()
            raise

    def update_no_commit(self, data):
        """
        Shorthand to update an entry via the database session based on current
        instance fields. It doesn't generate a commit. Keys that are not
        columns of the model are ignored.
        """
        self.updated_at = date_helpers.get_utc_now_datetime()
        for key, value in data.items():
            if hasattr(self.__class__, key):
                setattr(self, key, value)
        db.session.add(self)
