import json
import logging
from decimal import Decimal, InvalidOperation
import anthropic
from sqlalchemy.orm import Session
from config import settings
from crud import clients, financial, inventory
from schemas.client import ClientCreate
from schemas.inventory import MovementCreate

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an AI assistant for a European agricultural producer dashboard.
You help farmers manage stock, clients, and finances.
The current producer ID is {owner_id}. All operations are restricted to this producer.
Be professional, concise, and helpful."""

TOOLS = [
    {
        "name": "get_stock_levels",
        "description": "Get current stock levels for products from the database",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "add_stock_entry",
        "description": "Log a new stock entry into the inventory and ledger. Use a negative amount to remove stock.",
        "input_schema": {
            "type": "object",
            "properties": {
                "amount": {"type": "number", "description": "Amount to add or subtract"},
                "product_name": {"type": "string", "description": "Name of the product"},
                "reason": {"type": "string", "description": "Reason for the entry (harvest, sale, etc.)"},
                "unit": {"type": "string", "description": "Unit of the amount, e.g. kg, tons, units"},
            },
            "required": ["amount", "product_name", "reason"],
        },
    },
    {
        "name": "create_client",
        "description": "Create a new client record in the database",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Name of the client"},
                "email": {"type": "string", "description": "Email of the client"},
                "details": {"type": "string", "description": "Additional details about the client"},
            },
            "required": ["name"],
        },
    },
    {
        "name": "summarize_finances",
        "description": "Aggregate financial data from the transactions table",
        "input_schema": {"type": "object", "properties": {}},
    },
]


class AssistantUnavailableError(RuntimeError):
    pass


def _to_float(value):
    return float(value) if isinstance(value, Decimal) else value


class FarmAssistant:
    def __init__(self, db: Session, owner_id: str, client=None):
        if client is None:
            if not settings.ANTHROPIC_API_KEY:
                raise AssistantUnavailableError("ANTHROPIC_API_KEY is not configured")
            client = anthropic.Anthropic(api_key=settings.ANTHROPIC_API_KEY)
        self.client = client
        self.db = db
        self.owner_id = owner_id

    def get_stock_levels(self):
        items = inventory.get_inventory_items(self.db, self.owner_id, limit=1000)
        return [
            {"product_name": item.product_name, "quantity": _to_float(item.quantity), "unit": item.unit}
            for item in items
        ]

    def add_stock_entry(self, amount, product_name, reason, unit=None):
        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            raise ValueError(f"amount must be a number, got {amount!r}")
        if not amount.is_finite():
            raise ValueError(f"amount must be a number, got {amount!r}")
        if amount == 0:
            raise ValueError("Amount must not be zero")
        if unit is None:
            existing = inventory.find_inventory_item(self.db, self.owner_id, product_name)
            unit = existing.unit if existing else "units"

        movement = MovementCreate(
            product_name=product_name,
            direction="add" if amount > 0 else "subtract",
            quantity=abs(amount),
            unit=unit,
            reason=reason,
        )
        result = inventory.record_movement(self.db, self.owner_id, movement)
        item = result["item"]
        return {
            "success": True,
            "message": f"Successfully updated {item.product_name} by {amount} {unit}.",
            "quantity": _to_float(item.quantity),
            "unit": item.unit,
        }

    def create_client(self, name, email=None, details=None):
        db_client = clients.create_client(
            self.db, self.owner_id, ClientCreate(name=name, email=email or None, details=details)
        )
        return {
            "success": True,
            "client": {"id": db_client.id, "name": db_client.name, "email": db_client.email},
            "message": f"Client {name} created successfully.",
        }

    def summarize_finances(self):
        summary = financial.summarize_finances(self.db, self.owner_id)
        return {key: _to_float(value) for key, value in summary.items()}

    def run_tool(self, name: str, arguments: dict):
        handlers = {
            "get_stock_levels": self.get_stock_levels,
            "add_stock_entry": self.add_stock_entry,
            "create_client": self.create_client,
            "summarize_finances": self.summarize_finances,
        }
        handler = handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")
        logger.info("assistant tool call %s for owner %s", name, self.owner_id)
        return handler(**(arguments or {}))

    def _tool_results(self, content):
        results = []
        for block in content:
            if block.type != "tool_use":
                continue
            try:
                output = self.run_tool(block.name, block.input)
                results.append({
                    "type": "tool_result",
                    "tool_use_id": block.id,
                    "content": json.dumps(output, default=str),
                })
            except (ValueError, TypeError) as e:
                logger.warning("assistant tool %s failed: %s", block.name, e)
                results.append({
                    "type": "tool_result",
                    "tool_use_id": block.id,
                    "content": str(e),
                    "is_error": True,
                })
        return results

    def chat(self, messages: list) -> str:
        """Run the conversation until the model stops asking for tools."""
        messages = list(messages)
        system = SYSTEM_PROMPT.format(owner_id=self.owner_id)

        response = None
        for _ in range(settings.ASSISTANT_MAX_TOOL_ROUNDS + 1):
            response = self.client.messages.create(
                model=settings.ASSISTANT_MODEL,
                max_tokens=settings.ASSISTANT_MAX_TOKENS,
                system=system,
                tools=TOOLS,
                messages=messages,
            )
            if response.stop_reason != "tool_use":
                break
            messages.append({"role": "assistant", "content": response.content})
            messages.append({"role": "user", "content": self._tool_results(response.content)})
        else:
            logger.warning("assistant stopped after %s tool rounds", settings.ASSISTANT_MAX_TOOL_ROUNDS)

        return "".join(block.text for block in response.content if block.type == "text").strip()
