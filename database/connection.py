from typing import Optional, List, Dict, Any
from supabase import create_client, Client
from config.settings import get_supabase_config


class DatabaseError(Exception):
    """Raised when a call to the backend service fails"""


def _error_message(error: Exception) -> str:
    """Pull the human readable message out of a PostgREST/auth error"""
    message = getattr(error, 'message', None)
    if message:
        return str(message)
    return str(error)


def _user_to_dict(user: Any) -> Optional[Dict[str, Any]]:
    """Convert an auth user object into a plain dictionary"""
    if user is None:
        return None
    if hasattr(user, 'model_dump'):
        data = user.model_dump()
    elif isinstance(user, dict):
        data = dict(user)
    else:
        data = {
            'id': getattr(user, 'id', None),
            'email': getattr(user, 'email', None),
            'user_metadata': getattr(user, 'user_metadata', {}),
        }
    return {
        'id': str(data.get('id')) if data.get('id') is not None else None,
        'email': data.get('email'),
        'user_metadata': data.get('user_metadata') or {},
    }


class SupabaseConnection:
    """
    Singleton class to manage the Supabase client
    """
    _instance = None

    @classmethod
    def get_instance(cls):
        """Get or create singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, client: Optional[Client] = None):
        """Initialize connection"""
        self.client = client or self._create_client()

    def _create_client(self) -> Client:
        """Create Supabase client from secrets"""
        config = get_supabase_config()
        return create_client(config['url'], config['anon_key'])

    # Auth

    def sign_up(self, email: str, password: str, full_name: str) -> Optional[Dict[str, Any]]:
        """Register a new auth user; the profile row is created by a database trigger"""
        try:
            response = self.client.auth.sign_up({
                'email': email,
                'password': password,
                'options': {'data': {'full_name': full_name}}
            })
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        return _user_to_dict(response.user)

    def sign_in(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Sign in with email and password"""
        try:
            response = self.client.auth.sign_in_with_password({
                'email': email,
                'password': password
            })
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        return _user_to_dict(response.user)

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e

    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> None:
        """Send a password reset email"""
        options = {'redirect_to': redirect_to} if redirect_to else {}
        try:
            self.client.auth.reset_password_for_email(email, options)
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e

    def get_session_user(self) -> Optional[Dict[str, Any]]:
        """Return the user of the current auth session, if any"""
        try:
            session = self.client.auth.get_session()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        if not session:
            return None
        return _user_to_dict(session.user)

    # Rows

    def select(self,
               table: str,
               columns: str = "*",
               filters: Optional[Dict[str, Any]] = None,
               order_by: Optional[str] = "created_at",
               ascending: bool = False) -> List[Dict[str, Any]]:
        """
        Select rows from a table

        Args:
            table (str): Table name
            columns (str): PostgREST column list, may embed related tables
            filters (Optional[Dict[str, Any]]): Equality filters
            order_by (Optional[str]): Column to order by
            ascending (bool): Sort direction

        Returns:
            List[Dict[str, Any]]: Matching rows
        """
        try:
            query = self.client.table(table).select(columns)
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            if order_by:
                query = query.order(order_by, desc=not ascending)
            response = query.execute()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        return response.data or []

    def select_one(self, table: str, row_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a single row by id"""
        rows = self.select(table, filters={'id': row_id}, order_by=None)
        return rows[0] if rows else None

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a row and return the persisted row"""
        try:
            response = self.client.table(table).insert(row).execute()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        if not response.data:
            raise DatabaseError(f"Insert into {table} returned no row")
        return response.data[0]

    def update(self, table: str, row_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update and return the updated row"""
        try:
            response = self.client.table(table).update(updates).eq('id', row_id).execute()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e
        if not response.data:
            raise DatabaseError(f"No row with id {row_id} in {table}")
        return response.data[0]

    def delete(self, table: str, row_id: str) -> None:
        try:
            self.client.table(table).delete().eq('id', row_id).execute()
        except Exception as e:
            raise DatabaseError(_error_message(e)) from e


__all__ = ['SupabaseConnection', 'DatabaseError']
