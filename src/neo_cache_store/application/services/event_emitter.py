"""Cache event emitter.

ONLY event subscription and delivery - callback registry owned by each
cache component, delivering lifecycle events synchronously in emission
order.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ...core.events.cache_event import CacheEvent, CacheEventListener

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    """A registered listener."""
    
    subscription_id: str
    event: CacheEvent
    listener: CacheEventListener
    once: bool = False


class CacheEventEmitter:
    """Synchronous event emitter for cache lifecycle events.
    
    Listeners are called in registration order during emit(). There is no
    buffering or replay: a listener registered after an event was emitted
    never sees it. Exceptions raised by a listener propagate to the emitter's
    caller.
    """
    
    def __init__(self):
        self._subscriptions: Dict[CacheEvent, List[Subscription]] = {
            event: [] for event in CacheEvent
        }
    
    def on(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> str:
        """Subscribe to an event.
        
        Args:
            event: CacheEvent member or its name, e.g. "cache:hit"
            listener: Called with (key, value) for hit/set, (key,) for miss/deleted
            
        Returns:
            Subscription ID that can be passed to off()
        """
        return self._add(event, listener, once=False)
    
    def once(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> str:
        """Subscribe to the next occurrence of an event only."""
        return self._add(event, listener, once=True)
    
    def off(self, subscription_id: str) -> bool:
        """Unsubscribe by subscription ID.
        
        Returns:
            True if the subscription existed and was removed
        """
        for subscriptions in self._subscriptions.values():
            for index, subscription in enumerate(subscriptions):
                if subscription.subscription_id == subscription_id:
                    del subscriptions[index]
                    return True
        return False
    
    def remove_listener(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> bool:
        """Remove the earliest registration of listener for event."""
        subscriptions = self._subscriptions[CacheEvent.parse(event)]
        for index, subscription in enumerate(subscriptions):
            if subscription.listener == listener:
                del subscriptions[index]
                return True
        return False
    
    def remove_all_listeners(self, event: Optional[Union[CacheEvent, str]] = None) -> None:
        """Remove every listener, or only those for one event."""
        if event is None:
            for subscriptions in self._subscriptions.values():
                subscriptions.clear()
        else:
            self._subscriptions[CacheEvent.parse(event)].clear()
    
    def listener_count(self, event: Union[CacheEvent, str]) -> int:
        """Get number of listeners registered for event."""
        return len(self._subscriptions[CacheEvent.parse(event)])
    
    def emit(self, event: Union[CacheEvent, str], *args) -> bool:
        """Deliver event to its listeners.
        
        The listener list is snapshotted first, so listeners added or removed
        while delivering take effect from the next emission.
        
        Returns:
            True if at least one listener was called
        """
        cache_event = CacheEvent.parse(event)
        subscriptions = self._subscriptions[cache_event]
        if not subscriptions:
            return False
        
        snapshot = list(subscriptions)
        for subscription in snapshot:
            if subscription.once:
                self.off(subscription.subscription_id)
            subscription.listener(*args)
        
        return True
    
    def _add(self, event: Union[CacheEvent, str], listener: CacheEventListener, once: bool) -> str:
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        
        cache_event = CacheEvent.parse(event)
        subscription = Subscription(
            subscription_id=str(uuid.uuid4()),
            event=cache_event,
            listener=listener,
            once=once
        )
        self._subscriptions[cache_event].append(subscription)
        logger.debug("Registered %s listener %s", cache_event.value, subscription.subscription_id)
        return subscription.subscription_id
