"""Game content: hero and monster actions, hero and monster types, the bite item and the FOV event."""