from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select

# Type générique pour le modèle (Todo, User, RefreshToken)
ModelT = TypeVar("ModelT", bound=SQLModel)

# bornes d'une clé INTEGER (64 bits signés) : au-delà, aucun enregistrement possible
MAX_INT_ID = 2**63 - 1

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements, dans l'ordre par défaut de la base."""
        return self.session.exec(select(self.model)).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        if isinstance(id_, int) and not -MAX_INT_ID - 1 <= id_ <= MAX_INT_ID:
            return None
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        self.session.add(entity)
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            # flush pour obtenir l'ID sans commit (utile pour FKs)
            self.session.flush()
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Met à jour un enregistrement existant.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            self.session.flush()
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        """Supprime un enregistrement."""
        self.session.delete(entity)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
